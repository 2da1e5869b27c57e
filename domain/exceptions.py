"""
Domain exceptions raised by the application and infrastructure layers.

The HTTP layer maps these to status codes in app/main.py.
"""


class TransactionsError(Exception):
    """Base class for all errors raised by this service."""


class SeedSourceError(TransactionsError):
    """The seed dataset could not be fetched or is malformed."""


class StoreUnavailableError(TransactionsError):
    """The transaction store failed while executing a query."""

    def __init__(self, message: str, operation: str = "unknown"):
        super().__init__(message)
        self.operation = operation


class InvalidQueryError(TransactionsError):
    """A query parameter could not be interpreted."""
