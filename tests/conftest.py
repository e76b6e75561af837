"""Pytest configuration and shared fixtures for file poller tests."""

import time
from pathlib import Path
from typing import Callable, Generator

import pytest

from common.file_watcher import FileChangeWatcher

# Time allowed for the OS to deliver events to the observer thread
SETTLE_SECONDS = 1.0

RESOURCES = Path(__file__).parent / "resources"


@pytest.fixture
def resources_dir() -> Path:
    return RESOURCES


@pytest.fixture
def settle() -> Callable[[], None]:
    """Wait until pending filesystem events have been delivered."""

    def _settle() -> None:
        time.sleep(SETTLE_SECONDS)

    return _settle


@pytest.fixture
def target_file(tmp_path: Path) -> Path:
    """An existing, unmodified file in its own directory."""
    path = tmp_path / "a.txt"
    path.write_text("initial")
    return path


@pytest.fixture
def watcher(target_file: Path) -> Generator[FileChangeWatcher, None, None]:
    with FileChangeWatcher.create(str(target_file)) as file_watcher:
        yield file_watcher
