"""HTTP feed source implementation."""

from urllib.parse import urlparse

import httpx

from feedkit.exceptions import FetchError
from feedkit.utils.logger import get_logger
from feedkit.utils.string_utils import str_to_url

logger = get_logger(__name__)


class HttpFeedSource:
    """Fetches a feed document over HTTP(S)."""

    def __init__(
        self,
        url: str,
        source_id: str | None = None,
        timeout: int = 30,
        user_agent: str = "feedkit/0.1 (RSS reader)",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize the feed source.

        Args:
            url: Feed URL, e.g. http://feeds2.feedburner.com/TheLinuxActionShowOGG.
            source_id: Unique source identifier. Defaults to the URL host.
            timeout: Request timeout in seconds.
            user_agent: User-Agent header for requests.
            transport: Optional httpx transport, used by tests.

        Raises:
            InvalidUrlError: When url is not an absolute URL.
        """
        str_to_url(url, "feed url")
        self._url = url
        self._source_id = source_id or self._derive_source_id(url)
        self._timeout = timeout
        self._user_agent = user_agent
        self._transport = transport

    @property
    def source_id(self) -> str:
        return self._source_id

    @property
    def url(self) -> str:
        return self._url

    async def fetch_raw(self) -> bytes:
        """Fetch the raw feed document.

        Raises:
            FetchError: When request fails or returns an error status.
        """
        headers = {"User-Agent": self._user_agent}

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.get(self._url, headers=headers)
                response.raise_for_status()
        except httpx.TimeoutException as e:
            raise FetchError(self._source_id, f"Request timed out: {e}") from e
        except httpx.HTTPStatusError as e:
            raise FetchError(
                self._source_id, f"HTTP {e.response.status_code}: {e.response.text[:200]}"
            ) from e
        except httpx.RequestError as e:
            raise FetchError(self._source_id, f"Request failed: {e}") from e

        logger.info(
            "Feed fetched",
            source_id=self._source_id,
            status=response.status_code,
            size=len(response.content),
        )
        return response.content

    def _derive_source_id(self, url: str) -> str:
        """Derive source_id from URL.

        Example: http://feeds2.feedburner.com/TheLinuxActionShowOGG -> feeds2.feedburner.com
        """
        return urlparse(url).hostname or url
