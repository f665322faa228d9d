from .errors import (
    APIError,
    DecodingError,
    EncodingError,
    HTTPError,
    ServerRejectedError,
    TransportError,
)

__all__ = [
    "APIError",
    "DecodingError",
    "EncodingError",
    "HTTPError",
    "ServerRejectedError",
    "TransportError",
]
