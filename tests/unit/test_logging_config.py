"""Unit tests for logging configuration."""

import logging
from collections.abc import Iterator

import pytest
from rich.logging import RichHandler

from tingly_launcher.logging_config import configure_logging, resolve_level


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    """The package logger, restored after the test."""
    logger = logging.getLogger("tingly_launcher")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.mark.core
class TestResolveLevel:
    """Tests for resolve_level()."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [("DEBUG", logging.DEBUG), ("info", logging.INFO), (" error ", logging.ERROR)],
    )
    def test_names(self, name: str, expected: int) -> None:
        """Level names are matched case-insensitively."""
        assert resolve_level(name) == expected

    def test_unknown_name_falls_back_to_warning(self) -> None:
        """Unrecognised names use WARNING."""
        assert resolve_level("chatty") == logging.WARNING

    def test_numbers_pass_through(self) -> None:
        """Numeric levels are returned unchanged."""
        assert resolve_level(15) == 15


@pytest.mark.core
class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_sets_level(self, package_logger: logging.Logger) -> None:
        """The package logger takes the requested level."""
        configure_logging("DEBUG")

        assert package_logger.level == logging.DEBUG

    def test_installs_single_rich_handler(self, package_logger: logging.Logger) -> None:
        """Repeated calls do not stack handlers."""
        configure_logging("INFO")
        configure_logging("WARNING")

        rich_handlers = [h for h in package_logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
        assert rich_handlers[0].console.stderr
