"""Unit tests for host platform resolution."""

import pytest

from tingly_launcher.core.exceptions import UnsupportedPlatformError
from tingly_launcher.core.platforms import resolve_platform


@pytest.mark.core
@pytest.mark.tier(0)
class TestResolvePlatform:
    """Tests for resolve_platform()."""

    @pytest.mark.parametrize(
        ("machine", "arch"),
        [
            ("x86_64", "amd64"),
            ("AMD64", "amd64"),
            ("x64", "amd64"),
            ("i686", "386"),
            ("ia32", "386"),
            ("aarch64", "arm64"),
            ("arm64", "arm64"),
        ],
    )
    def test_linux_architectures(self, machine: str, arch: str) -> None:
        """Known Linux architectures map to release names."""
        target = resolve_platform("linux", machine)

        assert target.os_name == "linux"
        assert target.arch == arch
        assert target.suffix == ""

    def test_linux_unknown_architecture_passes_through(self) -> None:
        """Unrecognised architectures are used as-is."""
        assert resolve_platform("linux", "riscv64").arch == "riscv64"

    def test_unknown_architecture_keeps_its_case(self) -> None:
        """Only the table lookup ignores case; the fallback is the raw value."""
        assert resolve_platform("linux", "RISCV64").arch == "RISCV64"
        assert resolve_platform("linux", "AARCH64").arch == "arm64"

    def test_macos_arm64(self) -> None:
        """Apple silicon maps to arm64."""
        target = resolve_platform("darwin", "arm64")

        assert (target.os_name, target.arch) == ("macos", "arm64")

    def test_macos_other_architectures_fall_back_to_amd64(self) -> None:
        """Every non-arm64 Mac uses the amd64 build."""
        assert resolve_platform("darwin", "x86_64").arch == "amd64"
        assert resolve_platform("darwin", "ppc").arch == "amd64"

    def test_windows_gets_exe_suffix(self) -> None:
        """Windows targets carry the .exe suffix."""
        target = resolve_platform("win32", "AMD64")

        assert (target.os_name, target.arch, target.suffix) == ("windows", "amd64", ".exe")

    def test_windows_unknown_architecture_passes_through(self) -> None:
        """Unrecognised Windows architectures are used unchanged, case included."""
        assert resolve_platform("win32", "ARM").arch == "ARM"

    @pytest.mark.parametrize("system", ["freebsd13", "aix", "sunos5", "cygwin"])
    def test_unsupported_system_raises(self, system: str) -> None:
        """Operating systems without builds are rejected."""
        with pytest.raises(UnsupportedPlatformError) as exc_info:
            resolve_platform(system, "x86_64")

        assert exc_info.value.system == system
        assert system in str(exc_info.value)

    def test_defaults_to_host(self) -> None:
        """Without arguments the host platform is resolved."""
        import sys

        if sys.platform not in ("darwin", "win32") and not sys.platform.startswith("linux"):
            pytest.skip("host platform has no release build")

        target = resolve_platform()

        assert target.os_name in ("linux", "macos", "windows")
        assert target.arch
