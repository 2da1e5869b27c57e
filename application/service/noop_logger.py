from typing import Any


class NoOpLogger:
    """Stand-in BoundLogger used when a service is built without a logging port."""

    def debug(self, event: str, **kwargs: Any) -> None: pass
    def info(self, event: str, **kwargs: Any) -> None: pass
    def warning(self, event: str, **kwargs: Any) -> None: pass
    def error(self, event: str, exc_info: bool = False, **kwargs: Any) -> None: pass
