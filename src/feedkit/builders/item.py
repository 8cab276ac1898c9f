"""Builder for the RSS <item> element."""

from feedkit.builders.base import logs_rejection
from feedkit.exceptions import MissingFieldError
from feedkit.models.elements import Category, Enclosure, Guid, Source
from feedkit.models.item import Item
from feedkit.models.itunes import ITunesItemExtension
from feedkit.utils.dates import parse_rfc2822
from feedkit.utils.string_utils import str_to_url


class ItemBuilder:
    """Assembles an Item from scalar fields and already-finalized elements.

    Example:
        >>> item = (
        ...     ItemBuilder()
        ...     .title("Making Music with Linux | LAS 408")
        ...     .link("http://www.jupiterbroadcasting.com/97561/")
        ...     .pub_date("Sun, 13 Mar 2016 20:02:02 -0700")
        ...     .validate()
        ...     .finalize()
        ... )

    finalize() does not re-check the title/description rule; call
    validate() first when the input is untrusted.
    """

    def __init__(self) -> None:
        self._title: str | None = None
        self._link: str | None = None
        self._description: str | None = None
        self._author: str | None = None
        self._categories: list[Category] = []
        self._comments: str | None = None
        self._enclosure: Enclosure | None = None
        self._guid: Guid | None = None
        self._pub_date: str | None = None
        self._source: Source | None = None
        self._itunes_ext: ITunesItemExtension | None = None

    def title(self, title: str | None) -> "ItemBuilder":
        self._title = title
        return self

    def link(self, link: str | None) -> "ItemBuilder":
        self._link = link
        return self

    def description(self, description: str | None) -> "ItemBuilder":
        self._description = description
        return self

    def author(self, author: str | None) -> "ItemBuilder":
        self._author = author
        return self

    def categories(self, categories: list[Category]) -> "ItemBuilder":
        self._categories = categories
        return self

    def comments(self, comments: str | None) -> "ItemBuilder":
        self._comments = comments
        return self

    def enclosure(self, enclosure: Enclosure | None) -> "ItemBuilder":
        self._enclosure = enclosure
        return self

    def guid(self, guid: Guid | None) -> "ItemBuilder":
        self._guid = guid
        return self

    def pub_date(self, pub_date: str | None) -> "ItemBuilder":
        """Set the publication date as an RFC 2822 string.

        Use feedkit.utils.format_rfc2822 to produce one from a datetime.
        """
        self._pub_date = pub_date
        return self

    def source(self, source: Source | None) -> "ItemBuilder":
        self._source = source
        return self

    def itunes_ext(self, itunes_ext: ITunesItemExtension | None) -> "ItemBuilder":
        self._itunes_ext = itunes_ext
        return self

    @logs_rejection
    def validate(self) -> "ItemBuilder":
        """Check the item-level rules.

        Raises:
            MissingFieldError: Neither title nor description is present.
            InvalidUrlError: link or comments is present but not a URL.
            InvalidDateError: pub_date is present but not RFC 2822.
        """
        if not self._title and not self._description:
            raise MissingFieldError(
                "Item.title", "either title or description must be present"
            )

        if self._link is not None:
            str_to_url(self._link, "Item.link")
        if self._comments is not None:
            str_to_url(self._comments, "Item.comments")
        if self._pub_date is not None:
            parse_rfc2822(self._pub_date, "Item.pub_date")

        return self

    def finalize(self) -> Item:
        return Item(
            title=self._title,
            link=self._link,
            description=self._description,
            author=self._author,
            categories=tuple(self._categories),
            comments=self._comments,
            enclosure=self._enclosure,
            guid=self._guid,
            pub_date=self._pub_date,
            source=self._source,
            itunes_ext=self._itunes_ext,
        )
