"""Abstract feed source interface using Protocol."""

from typing import Protocol


class FeedSource(Protocol):
    """RSS feed source abstraction protocol."""

    @property
    def source_id(self) -> str:
        """Unique identifier for this feed source."""
        ...

    async def fetch_raw(self) -> bytes:
        """Fetch the raw feed document.

        Returns:
            bytes: Raw XML, undecoded so the parser can honour the
            document's own encoding declaration.

        Raises:
            FetchError: When network request fails.
        """
        ...
