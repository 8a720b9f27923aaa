"""Serving releases from a mirror or a local test server.

This example shows how to point the launcher at a different download
host and cache directory, either through the environment or by building
the configuration explicitly.
"""

from pathlib import Path

from tingly_launcher import (
    BinaryCache,
    HttpStorage,
    Launcher,
    LauncherConfig,
    SubprocessExecutor,
    VersionSelector,
    ZipArchiveExtractor,
    resolve_platform,
)


# Option 1: Environment overrides (no code changes)
#   TINGLY_BOX_BASE_URL=https://mirror.internal/tingly-box \
#   TINGLY_BOX_CACHE_DIR=/opt/cache tingly-box

# Option 2: Explicit configuration and manual wiring
config = LauncherConfig(
    cache_root=Path("./.cache"),
    base_url="https://mirror.internal/tingly-box",
    proxy_url="http://proxy.internal:3128",
)
target = resolve_platform()

launcher = Launcher(
    config=config,
    target=target,
    cache=BinaryCache(config.cache_root, tool_name=config.tool_name),
    source=HttpStorage.from_config(config),
    extractor=ZipArchiveExtractor(),
    executor=SubprocessExecutor(apply_permissions=not target.is_windows),
)

task = launcher.download_task(VersionSelector("v1.2.3"))
print(f"Would download {task.url} into {task.destination}")

# install() always downloads, refreshing a cached copy
install = launcher.install(VersionSelector("v1.2.3"))
print(f"Installed {install.entry.binary_path}")
