"""Base file change watcher interface."""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Optional, Type


class BaseFileChangeWatcher(ABC):
    """Abstract base class for watchers that report whether one file changed."""

    @abstractmethod
    def poll_and_reset(self) -> bool:
        """Report whether the file changed since the previous call.

        Never blocks and never raises. Any number of changes between two calls
        are reported as a single ``True``; the state is cleared by the call.

        Returns:
            True if at least one change was observed since the last call
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release the underlying OS subscription. Safe to call more than once."""
        pass

    @property
    @abstractmethod
    def closed(self) -> bool:
        """Whether ``close()`` has been called."""
        pass

    def __enter__(self) -> "BaseFileChangeWatcher":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()
