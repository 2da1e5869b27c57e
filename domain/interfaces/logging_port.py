from typing_extensions import Protocol
from typing import Any


class BoundLogger(Protocol):
    """Logger carrying request context (operation, month, ...)."""

    def debug(self, event: str, **kwargs: Any) -> None: ...

    def info(self, event: str, **kwargs: Any) -> None:
        """
        Log an info event.

        Args:
            event: Event name, e.g. "seed_completed"
            **kwargs: Additional context fields
        """
        ...

    def warning(self, event: str, **kwargs: Any) -> None: ...

    def error(self, event: str, exc_info: bool = False, **kwargs: Any) -> None:
        """
        Log an error event.

        Args:
            event: Event name, e.g. "report_failed"
            exc_info: Whether to include the active exception's traceback
            **kwargs: Additional context fields
        """
        ...


class LoggingPort(Protocol):
    """Protocol for structured logging."""

    def bind(self, **kwargs: Any) -> BoundLogger:
        """Return a logger with `kwargs` attached to every event it emits."""
        ...
