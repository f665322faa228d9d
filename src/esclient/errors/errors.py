from typing import Final

_RETRYABLE_STATUS: Final[set[int]] = {429, 500, 502, 503, 504}


class APIError(Exception):
    """
    Base class for all errors raised by the search client.

    Attributes
    ----------
    message : str
        Human-readable explanation.
    status  : int | None
        HTTP status code, if a response was received.
    url     : str | None
        Requested URL, useful for logs.
    """

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        url: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.url = url

    # ---------------------------------------------------------------------
    # Helper utilities
    # ---------------------------------------------------------------------
    def is_retryable(self) -> bool:
        """Hint for callers; the client itself never retries."""
        return self.status in _RETRYABLE_STATUS

    def __str__(self) -> str:
        parts: list[str] = [self.message]
        if self.status is not None:
            parts.append(f"status={self.status}")
        if self.url:
            parts.append(f"url={self.url}")
        return " | ".join(parts)


# -------------------------------------------------------------------------
# Concrete error classes, one per failure category
# -------------------------------------------------------------------------
class EncodingError(APIError):
    """The document could not be serialized to JSON."""


class TransportError(APIError):
    """The server could not be reached (connection, DNS, timeout)."""

    def is_retryable(self) -> bool:
        return True


class HTTPError(APIError):
    """The server answered with a non-200 status; message is the status text."""


class DecodingError(APIError):
    """The response body is not a valid JSON envelope."""


class ServerRejectedError(APIError):
    """The server answered 200 but flagged the envelope with ``ok: false``."""
