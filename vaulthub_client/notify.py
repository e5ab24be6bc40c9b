"""
User-visible notices.

The presentation layer supplies a :class:`Notifier`; calls are fire-and-forget
and must not raise.
"""
import logging
from typing import Protocol, runtime_checkable

logger = logging.getLogger("vaulthub.notify")


@runtime_checkable
class Notifier(Protocol):
    def error(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...


class LoggingNotifier:
    """Default notifier: writes notices to the ``vaulthub.notify`` logger."""

    def error(self, message: str) -> None:
        logger.error(message)

    def warning(self, message: str) -> None:
        logger.warning(message)

    def success(self, message: str) -> None:
        logger.info(message)
