"""Single-file change watcher built on watchdog."""

import os
from threading import Lock
from typing import Any, Union

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from common.utils import logger

from .base import BaseFileChangeWatcher
from .metadata import WatchTarget

OBSERVER_JOIN_TIMEOUT = 5.0


def _decode_path(path: Union[str, bytes]) -> str:
    if isinstance(path, bytes):
        return path.decode("utf-8", errors="replace")
    return path


class TargetFileEventHandler(FileSystemEventHandler):
    """Flags events in the watched directory that land on the target file name."""

    def __init__(self, target: WatchTarget) -> None:
        super().__init__()
        self.target = target
        self._lock = Lock()
        self._changed = False

    def _handle_event(self, event: FileSystemEvent, path: Union[str, bytes]) -> None:
        try:
            if event.is_directory:
                return

            event_path = _decode_path(path)
            if not self.target.matches(event_path):
                return

            logger.debug(f"File event detected: {event.event_type} - {event_path}")
            with self._lock:
                self._changed = True

        except Exception as e:
            logger.error(f"Error handling file event {_decode_path(event.src_path)}: {e}")

    def on_created(self, event: FileSystemEvent) -> None:
        self._handle_event(event, event.src_path)

    def on_modified(self, event: FileSystemEvent) -> None:
        self._handle_event(event, event.src_path)

    def on_closed(self, event: FileSystemEvent) -> None:
        # close-after-write only; close-without-write has its own callback.
        # A poll landing between the modify and this close reports the write twice.
        self._handle_event(event, event.src_path)

    def on_moved(self, event: FileSystemEvent) -> None:
        # a move only replaces the target when it lands on the target name
        self._handle_event(event, event.dest_path)

    def consume(self) -> bool:
        """Return the accumulated flag and clear it in one step."""
        with self._lock:
            changed = self._changed
            self._changed = False
        return changed


class FileChangeWatcher(BaseFileChangeWatcher):
    """Watches one file and answers "has it changed since I last asked?".

    The parent directory is subscribed rather than the file itself, because
    a rename or copy that replaces the file is only visible at directory
    level. Events are filtered down to the file's base name.

    Example:
        with FileChangeWatcher.create("token.properties") as watcher:
            ...
            if watcher.poll_and_reset():
                reload()
    """

    def __init__(self, path: Union[str, "os.PathLike[str]"]) -> None:
        self.target = WatchTarget.from_path(path)
        self._event_handler = TargetFileEventHandler(self.target)
        self._observer: Any = Observer()
        self._closed = False
        self._observer_lost = False

        self._observer.schedule(
            self._event_handler, self.target.watched_dir, recursive=False
        )
        try:
            self._observer.start()
        except OSError as e:
            logger.error(f"Could not subscribe to {self.target.watched_dir}: {e}")
            raise

        logger.info(
            f"Started watcher for {self.target.file_name} in {self.target.watched_dir}"
        )

    @classmethod
    def create(cls, path: Union[str, "os.PathLike[str]"]) -> "FileChangeWatcher":
        """Validate ``path`` and start watching it.

        Raises:
            InvalidTargetError: If the path does not exist or is a directory
        """
        return cls(path)

    @property
    def path(self) -> str:
        return self.target.path

    @property
    def closed(self) -> bool:
        return self._closed

    def poll_and_reset(self) -> bool:
        if not self._closed and not self._observer_lost and not self._observer.is_alive():
            self._observer_lost = True
            logger.warning(
                f"Observer for {self.target.path} stopped unexpectedly, "
                "no further changes will be reported"
            )

        return self._event_handler.consume()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True

        try:
            self._observer.stop()
            if self._observer.is_alive():
                self._observer.join(timeout=OBSERVER_JOIN_TIMEOUT)
        except RuntimeError as e:
            logger.warning(f"Error stopping watcher for {self.target.path}: {e}")

        logger.info(f"Stopped watcher for {self.target.path}")

    def __enter__(self) -> "FileChangeWatcher":
        return self

    def __repr__(self) -> str:
        state = "closed" if self._closed else "open"
        return f"<FileChangeWatcher path={self.target.path!r} {state}>"
