"""Builder for the RSS <channel> element, the top of the feed tree."""

from feedkit.builders.base import logs_rejection
from feedkit.exceptions import MissingFieldError, OutOfRangeError
from feedkit.models.channel import Channel
from feedkit.models.elements import Category, Cloud, Image, TextInput
from feedkit.models.item import Item
from feedkit.models.itunes import ITunesChannelExtension
from feedkit.utils.dates import parse_rfc2822
from feedkit.utils.string_utils import int_to_string, str_to_url

WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MAX_SKIP_HOUR = 23


class ChannelBuilder:
    """Assembles a Channel from scalar fields and already-finalized elements.

    Items, categories, image, cloud, text input and the iTunes extension are
    built separately and passed in; the channel takes ownership of them at
    finalize() time.

    Example:
        >>> channel = (
        ...     ChannelBuilder()
        ...     .title("The Linux Action Show! OGG")
        ...     .link("http://www.jupiterbroadcasting.com/")
        ...     .description("Ogg Vorbis audio versions of The Linux Action Show!")
        ...     .skip_hours([6, 7, 8, 14, 22])
        ...     .skip_days(["Monday", "Sunday"])
        ...     .validate()
        ...     .finalize()
        ... )
        >>> channel.skip_hours
        ('6', '7', '8', '14', '22')
    """

    def __init__(self) -> None:
        self._title = ""
        self._link = ""
        self._description = ""
        self._language: str | None = None
        self._copyright: str | None = None
        self._managing_editor: str | None = None
        self._webmaster: str | None = None
        self._pub_date: str | None = None
        self._last_build_date: str | None = None
        self._categories: list[Category] = []
        self._generator: str | None = None
        self._docs: str | None = None
        self._cloud: Cloud | None = None
        self._ttl: int | None = None
        self._image: Image | None = None
        self._rating: str | None = None
        self._text_input: TextInput | None = None
        self._skip_hours: list[int] = []
        self._skip_days: list[str] = []
        self._items: list[Item] = []
        self._itunes_ext: ITunesChannelExtension | None = None

    def title(self, title: str) -> "ChannelBuilder":
        self._title = title
        return self

    def link(self, link: str) -> "ChannelBuilder":
        self._link = link
        return self

    def description(self, description: str) -> "ChannelBuilder":
        self._description = description
        return self

    def language(self, language: str | None) -> "ChannelBuilder":
        self._language = language
        return self

    def copyright(self, copyright: str | None) -> "ChannelBuilder":
        self._copyright = copyright
        return self

    def managing_editor(self, managing_editor: str | None) -> "ChannelBuilder":
        self._managing_editor = managing_editor
        return self

    def webmaster(self, webmaster: str | None) -> "ChannelBuilder":
        self._webmaster = webmaster
        return self

    def pub_date(self, pub_date: str | None) -> "ChannelBuilder":
        self._pub_date = pub_date
        return self

    def last_build_date(self, last_build_date: str | None) -> "ChannelBuilder":
        self._last_build_date = last_build_date
        return self

    def categories(self, categories: list[Category]) -> "ChannelBuilder":
        self._categories = categories
        return self

    def generator(self, generator: str | None) -> "ChannelBuilder":
        self._generator = generator
        return self

    def docs(self, docs: str | None) -> "ChannelBuilder":
        self._docs = docs
        return self

    def cloud(self, cloud: Cloud | None) -> "ChannelBuilder":
        self._cloud = cloud
        return self

    def ttl(self, ttl: int | None) -> "ChannelBuilder":
        """Set the number of minutes the channel may be cached."""
        self._ttl = ttl
        return self

    def image(self, image: Image | None) -> "ChannelBuilder":
        self._image = image
        return self

    def rating(self, rating: str | None) -> "ChannelBuilder":
        self._rating = rating
        return self

    def text_input(self, text_input: TextInput | None) -> "ChannelBuilder":
        self._text_input = text_input
        return self

    def skip_hours(self, skip_hours: list[int]) -> "ChannelBuilder":
        """Set the hours (0-23, GMT) aggregators may skip."""
        self._skip_hours = skip_hours
        return self

    def skip_days(self, skip_days: list[str]) -> "ChannelBuilder":
        """Set the weekday names (Monday..Sunday) aggregators may skip."""
        self._skip_days = skip_days
        return self

    def items(self, items: list[Item]) -> "ChannelBuilder":
        self._items = items
        return self

    def itunes_ext(self, itunes_ext: ITunesChannelExtension | None) -> "ChannelBuilder":
        self._itunes_ext = itunes_ext
        return self

    @logs_rejection
    def validate(self) -> "ChannelBuilder":
        """Check the channel-level rules, stopping at the first violation.

        Order: title, link, description, ttl, skip_hours, skip_days,
        pub_date, last_build_date.

        Raises:
            MissingFieldError: title, link or description is empty.
            InvalidUrlError: link is not an absolute URL.
            NegativeValueError: ttl is below zero.
            OutOfRangeError: a skip_hours entry is outside 0-23, or a
                skip_days entry is not an exact weekday name.
            InvalidDateError: pub_date or last_build_date is not RFC 2822.
        """
        if not self._title:
            raise MissingFieldError("Channel.title")
        if not self._link:
            raise MissingFieldError("Channel.link")
        str_to_url(self._link, "Channel.link")
        if not self._description:
            raise MissingFieldError("Channel.description")

        if self._ttl is not None:
            int_to_string(self._ttl, "Channel.ttl")

        for hour in self._skip_hours:
            if isinstance(hour, bool) or not 0 <= hour <= MAX_SKIP_HOUR:
                raise OutOfRangeError(hour, f"0-{MAX_SKIP_HOUR}", "Channel.skip_hours")

        for day in self._skip_days:
            if day not in WEEKDAYS:
                raise OutOfRangeError(day, "Monday..Sunday", "Channel.skip_days")

        if self._pub_date is not None:
            parse_rfc2822(self._pub_date, "Channel.pub_date")
        if self._last_build_date is not None:
            parse_rfc2822(self._last_build_date, "Channel.last_build_date")

        return self

    def finalize(self) -> Channel:
        """Construct the Channel, converting ttl and skip_hours to text.

        Raises:
            NegativeValueError: ttl or a skip_hours entry is below zero.
        """
        ttl = None if self._ttl is None else int_to_string(self._ttl, "Channel.ttl")
        skip_hours = tuple(int_to_string(hour, "Channel.skip_hours") for hour in self._skip_hours)

        return Channel(
            title=self._title,
            link=self._link,
            description=self._description,
            language=self._language,
            copyright=self._copyright,
            managing_editor=self._managing_editor,
            webmaster=self._webmaster,
            pub_date=self._pub_date,
            last_build_date=self._last_build_date,
            categories=tuple(self._categories),
            generator=self._generator,
            docs=self._docs,
            cloud=self._cloud,
            ttl=ttl,
            image=self._image,
            rating=self._rating,
            text_input=self._text_input,
            skip_hours=skip_hours,
            skip_days=tuple(self._skip_days),
            items=tuple(self._items),
            itunes_ext=self._itunes_ext,
        )
