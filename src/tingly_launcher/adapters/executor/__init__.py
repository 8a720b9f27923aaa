"""Executor adapters for running the cached binary."""

from tingly_launcher.adapters.executor.executor import (
    SubprocessExecutor,
    ensure_executable,
)


__all__ = ["SubprocessExecutor", "ensure_executable"]
