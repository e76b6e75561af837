"""Keeps parsed dimensions of a ``key=value`` file current."""

import os
from types import TracebackType
from typing import List, Optional, Type, Union

from common.file_watcher import BaseFileChangeWatcher, FileChangeWatcher
from common.models import Dimension
from common.utils import logger

from .oneagent_metadata_enricher import read_metadata_file


class MetadataFileMonitor:
    """Caches the dimensions of a metadata file and re-reads it only after it changed.

    The file is parsed once up front. Every ``dimensions()`` call asks the
    watcher whether the file changed since the last call, so the caller can
    poll as often as it likes without touching the disk in between.

    Args:
        path: The ``key=value`` file to monitor
        watcher: Watcher to use instead of a new ``FileChangeWatcher``. A watcher
            that is passed in is not closed by ``close()``.
    """

    def __init__(
        self,
        path: Union[str, "os.PathLike[str]"],
        watcher: Optional[BaseFileChangeWatcher] = None,
    ) -> None:
        self.path = os.fspath(path)
        self._owns_watcher = watcher is None
        self._watcher = watcher if watcher is not None else FileChangeWatcher.create(path)
        self._dimensions = read_metadata_file(self.path)
        self.refresh_count = 0

    def dimensions(self) -> List[Dimension]:
        if self._watcher.poll_and_reset():
            logger.info(f"Metadata file {self.path} changed, reloading")
            self._dimensions = read_metadata_file(self.path)
            self.refresh_count += 1
        return list(self._dimensions)

    def close(self) -> None:
        if self._owns_watcher:
            self._watcher.close()

    def __enter__(self) -> "MetadataFileMonitor":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()
