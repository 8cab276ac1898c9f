"""Feed retrieval service.

Coordinates fetching a feed document and parsing it into a Channel.
"""

from feedkit.models.channel import Channel
from feedkit.parsers.base import FeedParser
from feedkit.sources.base import FeedSource
from feedkit.utils.logger import get_logger

logger = get_logger(__name__)


class FeedService:
    """Fetch-then-parse facade over a feed source and a parser."""

    def __init__(self, source: FeedSource, parser: FeedParser):
        """Initialize feed service.

        Args:
            source: Where the raw feed document comes from.
            parser: Turns the raw document into a Channel.
        """
        self._source = source
        self._parser = parser

    async def fetch_channel(self) -> Channel:
        """Fetch and parse the feed.

        Returns:
            The validated Channel.

        Raises:
            FetchError: When retrieval fails.
            ParseError: When the document is not a valid RSS channel.
        """
        log = logger.bind(source_id=self._source.source_id)

        raw = await self._source.fetch_raw()
        channel = self._parser.parse(raw, self._source.source_id)

        log.info("Channel loaded", title=channel.title, items=len(channel.items))
        return channel
