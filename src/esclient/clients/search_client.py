"""Synchronous wrapper around the document endpoints of an
Elasticsearch-style server (``/{index}/{type}/{id}``).

Only indexing, fetching and deleting single documents are covered.
Every call makes exactly one HTTP request; failures surface as
:mod:`esclient.errors` exceptions and are never retried.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote, urlencode

import httpx
from pydantic import ValidationError

from esclient.errors.errors import DecodingError, EncodingError, ServerRejectedError
from esclient.models.search_models import ResponseEnvelope
from esclient.utils.config import SearchSettings

from .base_client import BaseAPIClient, status_error

logger = logging.getLogger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


def make_url(
    base_url: str,
    index: str,
    doctype: str,
    id: str,
    params: Mapping[str, str] | None = None,
) -> str:
    """Join the escaped path segments onto ``base_url`` and add the query string."""
    path = "/".join(quote(segment, safe="") for segment in (index, doctype, id))
    url = f"{base_url}/{path}"
    if params:
        url = f"{url}?{urlencode(dict(params))}"
    return url


class SearchClient(BaseAPIClient):
    """Index, get and delete single documents."""

    @classmethod
    def from_settings(
        cls,
        settings: SearchSettings | None = None,
        *,
        client: httpx.Client | None = None,
    ) -> SearchClient:
        settings = settings or SearchSettings()
        return cls(settings.url, timeout=settings.http_timeout, client=client)

    def _decode(self, body: bytes, url: str) -> ResponseEnvelope:
        try:
            return ResponseEnvelope.model_validate_json(body)
        except ValidationError as e:
            raise DecodingError(f"Invalid response body: {e}", url=url) from e

    def _handle_response(self, body: bytes, url: str) -> ResponseEnvelope:
        envelope = self._decode(body, url)
        if not envelope.ok:
            raise ServerRejectedError("Response wasn't OK", status=200, url=url)
        return envelope

    # --------------------------------- Documents ---------------------------------
    def index(
        self,
        index: str,
        doctype: str,
        id: str,
        document: Mapping[str, Any],
        params: Mapping[str, str] | None = None,
    ) -> str:
        """Store ``document`` and return its id.

        Pass an empty ``id`` to let the server generate one.
        """
        try:
            data = json.dumps(dict(document), allow_nan=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise EncodingError(f"Cannot serialize document: {e}") from e

        url = make_url(self.base_url, index, doctype, id, params)
        resp = self._request("POST", url, content=data, headers=JSON_HEADERS)
        envelope = self._handle_response(resp.content, url)
        logger.debug("Indexed %s/%s/%s", envelope.index, envelope.type, envelope.id)
        return envelope.id

    def get(
        self,
        index: str,
        doctype: str,
        id: str,
        params: Mapping[str, str] | None = None,
    ) -> dict[str, Any] | None:
        """Return the stored ``_source``, or None when the document is missing.

        Read responses carry no ``ok`` flag. A missing document comes back
        as 404 with ``found: false`` (``exists: false`` on 0.x servers);
        any other 404 is an HTTPError.
        """
        url = make_url(self.base_url, index, doctype, id, params)
        resp = self._request("GET", url, accept=(200, 404))
        if resp.status_code == 404:
            try:
                envelope = self._decode(resp.content, url)
            except DecodingError as e:
                raise status_error(resp, url) from e
            reported_missing = (
                "found" in envelope.model_fields_set and not envelope.found
            ) or envelope.exists is False
            if not reported_missing:
                raise status_error(resp, url)
            return None

        envelope = self._decode(resp.content, url)
        if not (envelope.found or envelope.exists):
            return None
        return envelope.source or {}

    def delete(
        self,
        index: str,
        doctype: str,
        id: str,
        params: Mapping[str, str] | None = None,
    ) -> bool:
        """Delete a document; return whether it existed."""
        url = make_url(self.base_url, index, doctype, id, params)
        resp = self._request("DELETE", url)
        return self._handle_response(resp.content, url).found
