"""Basic launch example.

This example shows the simplest usage pattern: read configuration from
the environment, resolve the host platform, and launch the binary. The
library downloads and caches the release on first use.
"""

from tingly_launcher import Launcher, LauncherConfig, VersionSelector, resolve_platform
from tingly_launcher.progress import RichProgressReporter


# Reads TINGLY_BOX_CACHE_DIR, TINGLY_BOX_BASE_URL and the proxy variables
config = LauncherConfig.from_environ()
target = resolve_platform()

# Wires BinaryCache, HttpStorage, ZipArchiveExtractor and SubprocessExecutor
launcher = Launcher.from_config(config, target)

# Where the binary lives, whether or not it is cached yet
entry = launcher.resolve(VersionSelector("latest"))
print(f"Binary path: {entry.binary_path} (cached: {entry.exists})")

# Download on a cache miss, with a progress bar
with RichProgressReporter() as progress:
    install = launcher.ensure_binary(VersionSelector("latest"), progress=progress)

if install.downloaded and install.report is not None:
    for path in install.report.extracted:
        print(f"Extracted: {path}")

# Run it, mirroring the child's exit status
result = launcher.run(install.entry, ["--version"])
print(f"Exit status: {result.exit_status}")
