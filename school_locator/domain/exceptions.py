"""Errors raised by school operations and mapped to HTTP responses by the API."""


class SchoolLocatorError(Exception):
    message = "School locator error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class InvalidRequest(SchoolLocatorError):
    """Client-side error, detected before the store is touched."""


class InvalidInput(InvalidRequest):
    message = "Invalid input data"


class InvalidLocation(InvalidRequest):
    message = "Invalid location data"


class OutOfRange(InvalidRequest):
    message = "Latitude or Longitude out of range"


class StorageFailure(SchoolLocatorError):
    """Raised when the underlying store rejects or cannot run a statement."""

    message = "Database error"

    def __init__(self, details: str):
        super().__init__()
        self.details = details

    def __str__(self) -> str:
        return f"{self.message}: {self.details}"
