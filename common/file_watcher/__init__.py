"""File watcher system components."""

from .base import BaseFileChangeWatcher
from .errors import FileWatcherError, InvalidTargetError
from .metadata import WatchTarget
from .watcher import FileChangeWatcher, TargetFileEventHandler

__all__ = [
    "BaseFileChangeWatcher",
    "FileChangeWatcher",
    "FileWatcherError",
    "InvalidTargetError",
    "TargetFileEventHandler",
    "WatchTarget",
]
