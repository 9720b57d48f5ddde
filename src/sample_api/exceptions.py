"""Exception hierarchy for sample-api."""


class SampleAPIError(Exception):
    """Base exception for all sample-api errors."""


class CacheConnectionError(SampleAPIError):
    """Raised when the Redis handshake fails or times out."""


class RemoteCallError(SampleAPIError):
    """Raised when a Redis read/increment fails while nominally connected.

    ``connection_lost`` is True when the failure means the connection itself
    is gone (socket error, timeout), as opposed to a single bad command.
    """

    def __init__(self, message: str, *, connection_lost: bool = False) -> None:
        super().__init__(message)
        self.connection_lost = connection_lost


class ValidationError(SampleAPIError):
    """Raised when a request payload is missing required fields."""


class NotFoundError(SampleAPIError):
    """Raised when a requested resource does not exist."""
