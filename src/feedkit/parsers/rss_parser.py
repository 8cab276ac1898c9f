"""RSS 2.0 parser that assembles validated Channel models.

feedparser turns the XML into loosely-typed dicts; every element is then
pushed through its builder so the result obeys the same rules as
hand-built feeds.
"""

from collections.abc import Callable
from typing import TypeVar

import feedparser
from defusedxml import DefusedXmlException
from defusedxml.ElementTree import ParseError as DefusedXMLParseError, fromstring as safe_fromstring

from feedkit.builders import (
    CategoryBuilder,
    ChannelBuilder,
    CloudBuilder,
    EnclosureBuilder,
    GuidBuilder,
    ImageBuilder,
    ItemBuilder,
    ITunesCategoryBuilder,
    ITunesChannelExtensionBuilder,
    ITunesItemExtensionBuilder,
    ITunesOwnerBuilder,
    SourceBuilder,
    TextInputBuilder,
)
from feedkit.exceptions import FeedValidationError, OutOfRangeError, ParseError
from feedkit.models import (
    Category,
    Channel,
    Cloud,
    Enclosure,
    Guid,
    Image,
    Item,
    ITunesCategory,
    ITunesChannelExtension,
    ITunesItemExtension,
    Source,
    TextInput,
)
from feedkit.models.itunes import ITUNES_NAMESPACE
from feedkit.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

# feedparser files <itunes:category> and <itunes:keywords> as tags under this scheme
ITUNES_TAG_SCHEME = "http://www.itunes.com/"


class RssParser:
    """Parser for RSS 2.0 feeds, including the iTunes podcast extension.

    Invalid child elements (an enclosure with a bad URL, an item with
    neither title nor description) are skipped with a warning unless the
    parser is strict. An invalid channel always fails the parse.
    """

    def __init__(self, strict: bool = False):
        """Initialize the parser.

        Args:
            strict: Raise ParseError on the first invalid child element
                instead of skipping it.
        """
        self._strict = strict

    def parse(self, raw_content: str | bytes, source_id: str) -> Channel:
        """Parse RSS content into a Channel.

        Args:
            raw_content: Raw XML from the feed source.
            source_id: Source identifier used in logs and errors.

        Returns:
            The validated Channel with its items.

        Raises:
            ParseError: When the XML is unusable or the channel is invalid.
        """
        if isinstance(raw_content, str):
            raw_content = raw_content.encode("utf-8")

        try:
            parsed = feedparser.parse(raw_content)

            if parsed.bozo and not parsed.feed and not parsed.entries:
                # feedparser sets bozo=1 for any parse issues
                raise ParseError(source_id, f"Feed parse error: {parsed.bozo_exception}")

            permalinks = _guid_permalinks(raw_content, len(parsed.entries))
            return self._build_channel(parsed, source_id, permalinks)

        except ParseError:
            raise
        except FeedValidationError as e:
            raise ParseError(source_id, str(e)) from e
        except Exception as e:
            raise ParseError(source_id, f"Unexpected parse error: {e}") from e

    def _build_channel(
        self,
        parsed: feedparser.FeedParserDict,
        source_id: str,
        permalinks: list[bool | None] | None,
    ) -> Channel:
        feed = parsed.feed

        items = []
        for index, entry in enumerate(parsed.entries):
            item = self._optional(
                lambda: self._build_item(entry, source_id, _permalink(entry, permalinks, index)),
                source_id,
                f"item[{index}]",
            )
            if item is not None:
                items.append(item)

        ttl = feed.get("ttl")
        itunes_ext = None
        if ITUNES_NAMESPACE in parsed.get("namespaces", {}).values():
            itunes_ext = self._optional(
                lambda: self._build_channel_itunes(feed), source_id, "itunes"
            )

        channel = (
            ChannelBuilder()
            .title(feed.get("title", ""))
            .link(feed.get("link", ""))
            .description(feed.get("subtitle", ""))
            .language(feed.get("language"))
            .copyright(feed.get("rights"))
            .managing_editor(feed.get("author"))
            .webmaster(feed.get("publisher"))
            .pub_date(feed.get("published"))
            .last_build_date(feed.get("updated"))
            .categories(self._build_categories(feed, source_id))
            .generator(feed.get("generator"))
            .docs(feed.get("docs"))
            .cloud(self._build_cloud(feed, source_id))
            .ttl(None if ttl is None else _to_int(ttl, "Channel.ttl"))
            .image(self._build_image(feed, source_id))
            .text_input(self._build_text_input(feed, source_id))
            .items(items)
            .itunes_ext(itunes_ext)
            .validate()
            .finalize()
        )

        logger.debug("Parsed channel", source_id=source_id, items=len(channel.items))
        return channel

    def _build_item(
        self, entry: feedparser.FeedParserDict, source_id: str, is_permalink: bool | None
    ) -> Item:
        enclosure = None
        enclosures = entry.get("enclosures") or []
        if enclosures:
            enclosure = self._optional(
                lambda: _build_enclosure(enclosures[0]), source_id, "enclosure"
            )

        guid = None
        if entry.get("id"):
            guid = self._optional(
                lambda: GuidBuilder()
                .value(entry["id"])
                .is_permalink(is_permalink)
                .validate()
                .finalize(),
                source_id,
                "guid",
            )

        source = None
        raw_source = entry.get("source")
        if raw_source and raw_source.get("href"):
            source = self._optional(
                lambda: SourceBuilder()
                .url(raw_source["href"])
                .title(raw_source.get("title"))
                .validate()
                .finalize(),
                source_id,
                "source",
            )

        return (
            ItemBuilder()
            .title(entry.get("title"))
            .link(entry.get("link"))
            .description(entry.get("description"))
            .author(entry.get("author"))
            .categories(self._build_categories(entry, source_id))
            .comments(entry.get("comments"))
            .enclosure(enclosure)
            .guid(guid)
            .pub_date(entry.get("published"))
            .source(source)
            .itunes_ext(self._build_item_itunes(entry, source_id))
            .validate()
            .finalize()
        )

    def _build_categories(
        self, context: feedparser.FeedParserDict, source_id: str
    ) -> list[Category]:
        categories = []
        for tag in context.get("tags") or []:
            if tag.get("scheme") == ITUNES_TAG_SCHEME:
                continue
            category = self._optional(
                lambda: CategoryBuilder()
                .name(tag.get("term") or "")
                .domain(tag.get("scheme"))
                .validate()
                .finalize(),
                source_id,
                "category",
            )
            if category is not None:
                categories.append(category)
        return categories

    def _build_cloud(self, feed: feedparser.FeedParserDict, source_id: str) -> Cloud | None:
        raw = feed.get("cloud")
        if not raw:
            return None
        return self._optional(
            lambda: CloudBuilder()
            .domain(_cloud_domain(raw.get("domain", "")))
            .port(_to_int(raw.get("port", "0"), "Cloud.port"))
            .path(raw.get("path", ""))
            .register_procedure(raw.get("registerprocedure", ""))
            .protocol(raw.get("protocol", ""))
            .validate()
            .finalize(),
            source_id,
            "cloud",
        )

    def _build_image(self, feed: feedparser.FeedParserDict, source_id: str) -> Image | None:
        raw = feed.get("image")
        # <itunes:image> only carries an href, a bare RSS <image> always has a link
        if not raw or not raw.get("link"):
            return None
        width = raw.get("width")
        height = raw.get("height")
        return self._optional(
            lambda: ImageBuilder()
            .url(raw.get("href", ""))
            .title(raw.get("title", ""))
            .link(raw.get("link", ""))
            .width(None if width is None else _to_int(width, "Image.width"))
            .height(None if height is None else _to_int(height, "Image.height"))
            .description(raw.get("description"))
            .validate()
            .finalize(),
            source_id,
            "image",
        )

    def _build_text_input(
        self, feed: feedparser.FeedParserDict, source_id: str
    ) -> TextInput | None:
        raw = feed.get("textinput")
        if not raw:
            return None
        return self._optional(
            lambda: TextInputBuilder()
            .title(raw.get("title", ""))
            .description(raw.get("description", ""))
            .name(raw.get("name", ""))
            .link(raw.get("link", ""))
            .validate()
            .finalize(),
            source_id,
            "text_input",
        )

    def _build_channel_itunes(self, feed: feedparser.FeedParserDict) -> ITunesChannelExtension:
        categories: list[ITunesCategory] = [
            ITunesCategoryBuilder().text(tag["term"]).validate().finalize()
            for tag in feed.get("tags") or []
            if tag.get("scheme") == ITUNES_TAG_SCHEME and tag.get("term")
        ]

        owner = None
        publisher = feed.get("publisher_detail")
        if publisher and (publisher.get("name") or publisher.get("email")):
            owner = (
                ITunesOwnerBuilder()
                .name(publisher.get("name"))
                .email(publisher.get("email"))
                .finalize()
            )

        image = feed.get("image") or {}

        return (
            ITunesChannelExtensionBuilder()
            .author(feed.get("author"))
            .block(_flag(feed.get("itunes_block")))
            .categories(categories)
            .image(image.get("href"))
            .explicit(_explicit(feed.get("itunes_explicit")))
            .complete(feed.get("itunes_complete"))
            .new_feed_url(feed.get("itunes_new-feed-url"))
            .owner(owner)
            .subtitle(feed.get("subtitle"))
            .summary(feed.get("summary"))
            .validate()
            .finalize()
        )

    def _build_item_itunes(
        self, entry: feedparser.FeedParserDict, source_id: str
    ) -> ITunesItemExtension | None:
        keys = ("itunes_duration", "itunes_explicit", "itunes_order", "itunes_block")
        if not any(entry.get(key) is not None for key in keys):
            return None

        image = entry.get("image") or {}
        return self._optional(
            lambda: ITunesItemExtensionBuilder()
            .block(_flag(entry.get("itunes_block")))
            .image(image.get("href"))
            .duration(entry.get("itunes_duration"))
            .explicit(_explicit(entry.get("itunes_explicit")))
            .order(entry.get("itunes_order"))
            .subtitle(entry.get("subtitle"))
            .validate()
            .finalize(),
            source_id,
            "itunes",
        )

    def _optional(self, build: Callable[[], T], source_id: str, element: str) -> T | None:
        """Run a builder chain, skipping the element on validation failure.

        Reason: one malformed enclosure or item should not discard the whole
        feed, unless the caller asked for strict parsing.
        """
        try:
            return build()
        except FeedValidationError as e:
            if self._strict:
                raise
            logger.warning(
                "Skipping invalid element",
                source_id=source_id,
                element=element,
                field=e.field,
                error=str(e),
            )
            return None


def _build_enclosure(raw: feedparser.FeedParserDict) -> Enclosure:
    return (
        EnclosureBuilder()
        .url(raw.get("href", ""))
        .length(_to_int(raw.get("length") or "0", "Enclosure.length"))
        .mime_type(raw.get("type", ""))
        .validate()
        .finalize()
    )


def _to_int(value: str | int, field: str) -> int:
    try:
        return int(str(value).strip())
    except ValueError as e:
        raise OutOfRangeError(value, "an integer", field) from e


def _cloud_domain(domain: str) -> str:
    """RSS clouds often carry a bare host name; give it a scheme."""
    if domain and "://" not in domain:
        return f"http://{domain}/"
    return domain


def _explicit(value: bool | None) -> str | None:
    # feedparser maps 'yes'/'true' to True and 'clean' to False
    if value is None:
        return None
    return "yes" if value else "clean"


def _flag(value: int | str | None) -> str | None:
    if value is None:
        return None
    return "yes" if str(value) in ("1", "yes", "Yes", "true") else "no"


def _guid_permalinks(raw_content: bytes, entry_count: int) -> list[bool | None] | None:
    """Read each item's <guid isPermaLink> attribute in document order.

    feedparser folds the attribute into ``guidislink``, which is also False
    for a permalink guid that follows the item's <link>. Returns None when
    the document cannot be read this way, or its items do not line up with
    feedparser's entries.
    """
    try:
        root = safe_fromstring(raw_content)
    except (DefusedXMLParseError, DefusedXmlException, ValueError) as e:
        logger.debug("Guid attributes unavailable", error=str(e))
        return None

    flags: list[bool | None] = []
    for item in root.findall("./channel/item"):
        guid = item.find("guid")
        attr = None if guid is None else guid.get("isPermaLink")
        flags.append(None if attr is None else attr.strip().lower() == "true")

    if len(flags) != entry_count:
        return None
    return flags


def _permalink(
    entry: feedparser.FeedParserDict, permalinks: list[bool | None] | None, index: int
) -> bool | None:
    if permalinks is None:
        return entry.get("guidislink")
    return permalinks[index]
