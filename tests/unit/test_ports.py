"""Unit tests for port interfaces."""

import pytest
from conftest import FakeExecutor, FakeSource

from tingly_launcher.core.ports import (
    ArchiveExtractorPort,
    ArchiveSourcePort,
    CachePort,
    ExecutorPort,
    NullProgressReporter,
    ProgressReporter,
)


@pytest.mark.core
@pytest.mark.tra("Port.ArchiveSourcePort")
@pytest.mark.tier(0)
def test_archive_source_port_has_fetch_method():
    """ArchiveSourcePort should have a fetch method."""
    assert hasattr(ArchiveSourcePort, "fetch")


@pytest.mark.core
@pytest.mark.tra("Port.ArchiveExtractorPort")
@pytest.mark.tier(0)
def test_archive_extractor_port_has_extract_method():
    """ArchiveExtractorPort should have an extract method."""
    assert hasattr(ArchiveExtractorPort, "extract")


@pytest.mark.core
@pytest.mark.tra("Port.CachePort")
@pytest.mark.tier(0)
@pytest.mark.parametrize("method", ["entry", "get", "prepare"])
def test_cache_port_methods(method: str):
    """CachePort should expose entry, get and prepare."""
    assert hasattr(CachePort, method)


@pytest.mark.core
@pytest.mark.tra("Port.ExecutorPort")
@pytest.mark.tier(0)
def test_test_doubles_satisfy_ports():
    """The shared fakes are structural implementations of their ports."""
    assert isinstance(FakeSource(), ArchiveSourcePort)
    assert isinstance(FakeExecutor(), ExecutorPort)


@pytest.mark.core
@pytest.mark.tra("Port.ProgressReporter")
@pytest.mark.tier(0)
class TestNullProgressReporter:
    """Tests for NullProgressReporter."""

    def test_satisfies_protocol(self):
        """NullProgressReporter should implement ProgressReporter."""
        assert isinstance(NullProgressReporter(), ProgressReporter)

    def test_callback_is_noop(self):
        """The callback accepts updates and returns None."""
        reporter = NullProgressReporter()
        callback = reporter.start_task("archive.zip", 0)

        assert callback(10, 100) is None
        reporter.finish_task("archive.zip")
