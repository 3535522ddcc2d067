"""
Custom exceptions for the Infrastructure layer.

Every error raised towards the HTTP boundary carries an ``ErrorKind``;
the app's exception handler turns the kind into a status code.
"""
from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    INVALID_INPUT = 400
    NOT_FOUND = 404
    INTERNAL = 500

    @property
    def status_code(self) -> int:
        return self.value


INTERNAL_ERROR_MESSAGE = "Internal server error"


class ProductAPIError(Exception):
    """Base class for errors surfaced to API clients."""

    kind = ErrorKind.INTERNAL
    message = INTERNAL_ERROR_MESSAGE

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidProductIDError(ProductAPIError):
    kind = ErrorKind.INVALID_INPUT
    message = "Invalid product ID"


class InvalidPayloadError(ProductAPIError):
    kind = ErrorKind.INVALID_INPUT
    message = "Invalid request payload"


class ProductNotFoundError(ProductAPIError):
    kind = ErrorKind.NOT_FOUND
    message = "Product not found"


class StoreError(ProductAPIError):
    """The database rejected a statement; ``message`` holds the driver's text."""

    kind = ErrorKind.INTERNAL
