"""Metadata models for file watcher system."""

import os
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Union

from .errors import InvalidTargetError


@dataclass(frozen=True)
class WatchTarget:
    """A validated file together with the directory that gets subscribed."""

    path: str
    watched_dir: str
    file_name: str
    created_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    @classmethod
    def from_path(cls, path: Union[str, "os.PathLike[str]"]) -> "WatchTarget":
        """Validate ``path`` and split it into directory and base name.

        The directory is taken from the path as given, so a symlinked path is
        watched where the link lives and replacing the link is seen.

        Raises:
            InvalidTargetError: If the path does not exist or is a directory
        """
        target = Path(path).absolute()
        resolved = target.resolve()
        if not resolved.exists():
            raise InvalidTargetError(str(path), "Path does not exist")

        if resolved.is_dir():
            raise InvalidTargetError(str(path), "Path is a directory")

        if not resolved.is_file():
            raise InvalidTargetError(str(path), "Path is not a regular file")

        return cls(
            path=str(target),
            watched_dir=str(target.parent),
            file_name=target.name,
        )

    def matches(self, event_path: str) -> bool:
        """Check whether an event path refers to the watched file."""
        return os.path.basename(event_path) == self.file_name
