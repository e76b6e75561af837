"""Errors raised by the file watcher components."""


class FileWatcherError(Exception):
    """Base class for file watcher errors."""


class InvalidTargetError(FileWatcherError, ValueError):
    """Raised when a watcher is pointed at something that is not a regular file."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{reason}: {path}")
        self.path = path
        self.reason = reason
