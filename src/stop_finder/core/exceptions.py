"""Custom exceptions for the nearby stop finder."""


class StopFinderError(Exception):
    """Base exception for stop finder errors."""

    pass


class InvalidUrlError(StopFinderError):
    """Raised when a base origin is not a valid absolute URL."""

    pass


class TransportError(StopFinderError):
    """Raised when a request cannot complete at the connection level."""

    pass


class HttpStatusError(StopFinderError):
    """Raised when a response completes with a status other than 200 OK."""

    def __init__(self, status_code: int, url: str | None = None) -> None:
        message = f"Unexpected HTTP status {status_code}"
        if url:
            message += f" from {url}"
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class MalformedResponseError(StopFinderError):
    """Raised when a response body is not the JSON document we expect."""

    pass


class ValidationError(StopFinderError):
    """Raised when input validation fails."""

    pass
