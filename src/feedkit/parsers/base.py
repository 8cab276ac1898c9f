"""Abstract feed parser interface using Protocol."""

from typing import Protocol

from feedkit.models.channel import Channel


class FeedParser(Protocol):
    """Feed parser abstraction protocol."""

    def parse(self, raw_content: str | bytes, source_id: str) -> Channel:
        """Parse feed content into a validated Channel.

        Args:
            raw_content: Raw XML from the feed source.
            source_id: Source identifier for logs and errors.

        Returns:
            The parsed Channel.

        Raises:
            ParseError: When parsing fails.
        """
        ...
