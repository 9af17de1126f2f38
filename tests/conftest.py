"""
Shared fixtures for the boat management tests.
"""

import pytest


@pytest.fixture(autouse=True)
def log_file(tmp_path, monkeypatch):
    """Send log entries to a per-test file instead of ./logs.log."""
    path = tmp_path / "test.log"
    monkeypatch.setenv("BOATS_LOG_FILE", str(path))
    monkeypatch.setenv("BOATS_LOG_ECHO", "0")
    return path


@pytest.fixture
def data_file(tmp_path):
    """Write the given lines to a data file and return its path."""
    def _write(*lines):
        path = tmp_path / "boats.csv"
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return path
    return _write
