"""Application layer - Guard against names re-entering their own resolution."""

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, Tuple

from bindery.domain import CircularDependencyError


class ResolutionGuard:
    """Tracks the names being resolved on the current thread's call stack.

    The in-progress names are kept per thread as an insertion-ordered dict,
    giving constant-time membership checks and the order needed to report
    the cycle. A disabled guard tracks nothing.

    Example:
        >>> guard = ResolutionGuard()
        >>> with guard.entering("a"):
        ...     with guard.entering("a"):  # Raises CircularDependencyError
        ...         pass
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._local = threading.local()

    def _in_progress(self) -> Dict[str, None]:
        try:
            return self._local.names
        except AttributeError:
            self._local.names = {}
            return self._local.names

    @property
    def in_progress(self) -> Tuple[str, ...]:
        """Names currently being resolved on this thread, outermost first."""
        return tuple(self._in_progress())

    @contextmanager
    def entering(self, name: str) -> Iterator[None]:
        """Mark ``name`` as being resolved for the duration of the block.

        Raises:
            CircularDependencyError: If ``name`` is already being resolved on
                this thread. The chain runs from its first entry back to it.
        """
        if not self.enabled:
            yield
            return

        names = self._in_progress()
        if name in names:
            chain = list(names)
            raise CircularDependencyError(chain[chain.index(name) :] + [name])

        names[name] = None
        try:
            yield
        finally:
            names.pop(name, None)

    def reset(self) -> None:
        """Forget every in-progress name on this thread."""
        self._in_progress().clear()
