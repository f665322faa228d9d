"""Minimal client for a search server's document REST API."""

from .clients.search_client import SearchClient
from .errors.errors import (
    APIError,
    DecodingError,
    EncodingError,
    HTTPError,
    ServerRejectedError,
    TransportError,
)
from .utils.config import SearchSettings

__all__ = [
    "SearchClient",
    "SearchSettings",
    "APIError",
    "DecodingError",
    "EncodingError",
    "HTTPError",
    "ServerRejectedError",
    "TransportError",
]
