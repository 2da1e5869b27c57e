"""
Logging adapter that implements LoggingPort protocol.

This adapter wraps structlog to provide a clean interface for the application layer.
"""
from typing import Any
from domain.interfaces import LoggingPort, BoundLogger
from infrastructure.logging.structlog_logs import logger as structlog_logger


class StructlogBoundLogger:
    """
    Wrapper for structlog bound logger that implements BoundLogger protocol.
    """
    
    def __init__(self, bound_logger):
        self._logger = bound_logger

    def debug(self, event: str, **kwargs: Any) -> None:
        self._logger.debug(event, **kwargs)
    
    def info(self, event: str, **kwargs: Any) -> None:
        self._logger.info(event, **kwargs)
    
    def warning(self, event: str, **kwargs: Any) -> None:
        self._logger.warning(event, **kwargs)
    
    def error(self, event: str, exc_info: bool = False, **kwargs: Any) -> None:
        self._logger.error(event, exc_info=exc_info, **kwargs)


class LoggingAdapter(LoggingPort):
    """
    Structured JSON logging for the seed and report services.

    Every call to bind() returns a fresh logger, so context bound for one
    request never leaks into another.
    """
    
    def bind(self, **kwargs: Any) -> BoundLogger:
        return StructlogBoundLogger(structlog_logger.bind(**kwargs))
