"""Single-shot asynchronous HTTP GET."""

import logging
from types import TracebackType

import httpx

from .exceptions import HttpStatusError, InvalidUrlError, TransportError
from .urls import redact_url

logger = logging.getLogger(__name__)


class HttpFetcher:
    """Issues one GET per call and returns the body of a 200 response."""

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        """Initialize the fetcher.

        Args:
            client: Optional client to reuse. A client passed in here is
                left open when the fetcher is closed.
        """
        self._owns_client = client is None
        self.client = client if client is not None else httpx.AsyncClient()

    async def fetch(self, url: str) -> str:
        """Fetch ``url`` and return the response body.

        Secret query parameters are masked in log records and error messages.

        Raises:
            InvalidUrlError: If ``url`` cannot be sent as a request URL
            TransportError: If the request cannot complete
            HttpStatusError: If the status code is anything but 200
        """
        display_url = redact_url(url)
        logger.debug(f"GET {display_url}")
        try:
            response = await self.client.get(url)
        except httpx.InvalidURL as e:
            raise InvalidUrlError(f"Cannot request {display_url}: {str(e)}") from e
        except httpx.RequestError as e:
            raise TransportError(
                f"Request to {display_url} failed: {str(e)}"
            ) from e

        logger.debug(f"{response.status_code} from {display_url}")
        if response.status_code != httpx.codes.OK:
            raise HttpStatusError(response.status_code, display_url)

        return response.text

    async def aclose(self) -> None:
        """Close the underlying client if this fetcher created it."""
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "HttpFetcher":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
