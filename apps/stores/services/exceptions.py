"""
Domain-specific exceptions for stores app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class StoresServiceError(Exception):
    """Base exception for all stores service errors."""
    code = 'stores_error'


class StoreNotFoundError(StoresServiceError):
    """Raised when a store does not exist."""
    code = 'store_not_found'

