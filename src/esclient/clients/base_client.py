import abc
import logging
from collections.abc import Collection

import httpx

from esclient.errors.errors import HTTPError, TransportError

logger = logging.getLogger(__name__)


def status_error(resp: httpx.Response, url: str) -> HTTPError:
    """HTTPError carrying the status line text as sent by the server."""
    return HTTPError(
        f"{resp.status_code} {resp.reason_phrase}", status=resp.status_code, url=url
    )


class BaseAPIClient(abc.ABC):
    """Holds the base URL and the HTTP transport; one attempt per request."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float | None = 10,
        client: httpx.Client | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    @property
    def base_url(self) -> str:
        return self._base_url

    def _request(
        self,
        method: str,
        url: str,
        *,
        content: bytes | None = None,
        headers: dict[str, str] | None = None,
        accept: Collection[int] = (200,),
    ) -> httpx.Response:
        """Send one request and return the fully read, closed response.

        A status outside ``accept`` raises HTTPError without reading the body.
        """
        logger.debug("%s %s", method, url)
        try:
            with self._client.stream(
                method, url, content=content, headers=headers
            ) as resp:
                if resp.status_code not in accept:
                    logger.debug(
                        "HTTP error",
                        extra={"status": resp.status_code, "url": url},
                    )
                    raise status_error(resp, url)
                resp.read()
                return resp
        except httpx.RequestError as e:
            logger.debug("Request to %s failed: %s", url, e)
            raise TransportError(str(e) or type(e).__name__, url=url) from e

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
