"""Test configuration and fixtures for dir2tree."""

import pytest

from dir2tree.file_system.memory import MemoryFileSystem


def pytest_addoption(parser):
    """Add custom command-line options for tests."""
    parser.addoption("--run-cli-tests", action="store_true", default=False, help="Run CLI integration tests (slow)")


@pytest.fixture
def memory_fs():
    """An empty in-memory filesystem with a /root directory."""
    fs = MemoryFileSystem()
    fs.add_dir("/root")
    return fs
