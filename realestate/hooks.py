"""
Observability hooks for valuation operations.

Every property operation reports itself to the hook the instance was built
with. The default hook does nothing; ``LoggingHook`` turns each call into a
DEBUG log record. Hooks belong to the instance, so two properties can be
observed differently in the same process.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional


logger = logging.getLogger(__name__)


# (operation name, the property, operation result or None)
ValuationHook = Callable[[str, Any, Optional[Any]], None]


def null_hook(operation: str, subject: Any, result: Optional[Any] = None) -> None:
    """Default hook: ignore the event."""
    return None


class LoggingHook:
    """
    Hook that logs each valuation operation.

    Args:
        log: Logger to write to (default: this module's logger)
        level: Level for the emitted records (default: DEBUG)
    """

    def __init__(self, log: Optional[logging.Logger] = None, level: int = logging.DEBUG):
        self._log = log or logger
        self._level = level

    def __call__(self, operation: str, subject: Any, result: Optional[Any] = None) -> None:
        if result is None:
            self._log.log(
                self._level, "%s() called on %s", operation, type(subject).__name__
            )
        else:
            self._log.log(
                self._level,
                "%s() called on %s -> %r",
                operation,
                type(subject).__name__,
                result,
            )


class RecordingHook:
    """
    Hook that keeps every event in memory.

    Useful for asserting which operations ran, e.g. that ``describe()``
    recomputes the valuation instead of caching it.
    """

    def __init__(self):
        self.events: list[tuple[str, Any]] = []

    def __call__(self, operation: str, subject: Any, result: Optional[Any] = None) -> None:
        self.events.append((operation, result))

    @property
    def operations(self) -> list[str]:
        """Operation names in call order."""
        return [operation for operation, _ in self.events]
