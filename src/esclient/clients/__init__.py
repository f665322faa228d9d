"""HTTP clients for the search server."""

from .base_client import BaseAPIClient
from .search_client import SearchClient, make_url

__all__ = ["BaseAPIClient", "SearchClient", "make_url"]
