"""Builders for the iTunes podcast namespace extensions.

Values are free-form strings as they appear in the feed. validate() checks
the few fields whose format Apple's podcast requirements pin down
(URLs, explicit flag, duration, episode order); finalize() copies verbatim.
"""

import re

from feedkit.builders.base import logs_rejection
from feedkit.exceptions import FeedValidationError, MissingFieldError, OutOfRangeError
from feedkit.models.itunes import (
    ITunesCategory,
    ITunesChannelExtension,
    ITunesItemExtension,
    ITunesOwner,
)
from feedkit.utils.string_utils import str_to_url

EXPLICIT_VALUES = ("yes", "no", "clean", "true", "false")

# SS, MM:SS or HH:MM:SS
_DURATION_RE = re.compile(r"^\d+(?::[0-5]?\d){0,2}$")
_ORDER_RE = re.compile(r"\d+", re.ASCII)


def _check_explicit(value: str | None, field: str) -> None:
    if value is not None and value.lower() not in EXPLICIT_VALUES:
        raise OutOfRangeError(value, ", ".join(EXPLICIT_VALUES), field)


def _check_category(category: ITunesCategory, field: str) -> None:
    if not category.text:
        raise MissingFieldError(f"{field}.text")
    if category.subcategory is not None:
        _check_category(category.subcategory, f"{field}.subcategory")


class ITunesCategoryBuilder:
    """Assembles an ITunesCategory.

    A category owns at most one subcategory, which is itself a full
    ITunesCategory. The podcast directory only uses one level of nesting.
    """

    def __init__(self) -> None:
        self._text = ""
        self._subcategory: ITunesCategory | None = None

    def text(self, text: str) -> "ITunesCategoryBuilder":
        self._text = text
        return self

    def subcategory(self, subcategory: ITunesCategory | None) -> "ITunesCategoryBuilder":
        self._subcategory = subcategory
        return self

    @logs_rejection
    def validate(self) -> "ITunesCategoryBuilder":
        if not self._text:
            raise MissingFieldError("ITunesCategory.text")
        if self._subcategory is not None:
            _check_category(self._subcategory, "ITunesCategory.subcategory")
        return self

    def finalize(self) -> ITunesCategory:
        return ITunesCategory(text=self._text, subcategory=self._subcategory)


class ITunesOwnerBuilder:
    def __init__(self) -> None:
        self._name: str | None = None
        self._email: str | None = None

    def name(self, name: str | None) -> "ITunesOwnerBuilder":
        self._name = name
        return self

    def email(self, email: str | None) -> "ITunesOwnerBuilder":
        self._email = email
        return self

    def validate(self) -> "ITunesOwnerBuilder":
        return self

    def finalize(self) -> ITunesOwner:
        return ITunesOwner(name=self._name, email=self._email)


class ITunesChannelExtensionBuilder:
    """Assembles the channel-level iTunes extension."""

    def __init__(self) -> None:
        self._author: str | None = None
        self._block: str | None = None
        self._categories: list[ITunesCategory] = []
        self._image: str | None = None
        self._explicit: str | None = None
        self._complete: str | None = None
        self._new_feed_url: str | None = None
        self._owner: ITunesOwner | None = None
        self._subtitle: str | None = None
        self._summary: str | None = None
        self._keywords: str | None = None

    def author(self, author: str | None) -> "ITunesChannelExtensionBuilder":
        self._author = author
        return self

    def block(self, block: str | None) -> "ITunesChannelExtensionBuilder":
        self._block = block
        return self

    def categories(self, categories: list[ITunesCategory]) -> "ITunesChannelExtensionBuilder":
        self._categories = categories
        return self

    def image(self, image: str | None) -> "ITunesChannelExtensionBuilder":
        self._image = image
        return self

    def explicit(self, explicit: str | None) -> "ITunesChannelExtensionBuilder":
        self._explicit = explicit
        return self

    def complete(self, complete: str | None) -> "ITunesChannelExtensionBuilder":
        self._complete = complete
        return self

    def new_feed_url(self, new_feed_url: str | None) -> "ITunesChannelExtensionBuilder":
        self._new_feed_url = new_feed_url
        return self

    def owner(self, owner: ITunesOwner | None) -> "ITunesChannelExtensionBuilder":
        self._owner = owner
        return self

    def subtitle(self, subtitle: str | None) -> "ITunesChannelExtensionBuilder":
        self._subtitle = subtitle
        return self

    def summary(self, summary: str | None) -> "ITunesChannelExtensionBuilder":
        self._summary = summary
        return self

    def keywords(self, keywords: str | None) -> "ITunesChannelExtensionBuilder":
        self._keywords = keywords
        return self

    @logs_rejection
    def validate(self) -> "ITunesChannelExtensionBuilder":
        """Check categories, image, new_feed_url and explicit.

        Raises:
            MissingFieldError: A category (or subcategory) has empty text.
            InvalidUrlError: image or new_feed_url is present but not a URL.
            OutOfRangeError: explicit is not yes/no/clean/true/false.
        """
        for index, category in enumerate(self._categories):
            _check_category(category, f"ITunesChannelExtension.categories[{index}]")

        if self._image is not None:
            str_to_url(self._image, "ITunesChannelExtension.image")
        if self._new_feed_url is not None:
            str_to_url(self._new_feed_url, "ITunesChannelExtension.new_feed_url")

        _check_explicit(self._explicit, "ITunesChannelExtension.explicit")
        return self

    def finalize(self) -> ITunesChannelExtension:
        return ITunesChannelExtension(
            author=self._author,
            block=self._block,
            categories=tuple(self._categories),
            image=self._image,
            explicit=self._explicit,
            complete=self._complete,
            new_feed_url=self._new_feed_url,
            owner=self._owner,
            subtitle=self._subtitle,
            summary=self._summary,
            keywords=self._keywords,
        )


class ITunesItemExtensionBuilder:
    """Assembles the item-level (episode) iTunes extension."""

    def __init__(self) -> None:
        self._author: str | None = None
        self._block: str | None = None
        self._image: str | None = None
        self._duration: str | None = None
        self._explicit: str | None = None
        self._closed_captioned: str | None = None
        self._order: str | None = None
        self._subtitle: str | None = None
        self._summary: str | None = None
        self._keywords: str | None = None

    def author(self, author: str | None) -> "ITunesItemExtensionBuilder":
        self._author = author
        return self

    def block(self, block: str | None) -> "ITunesItemExtensionBuilder":
        self._block = block
        return self

    def image(self, image: str | None) -> "ITunesItemExtensionBuilder":
        self._image = image
        return self

    def duration(self, duration: str | None) -> "ITunesItemExtensionBuilder":
        self._duration = duration
        return self

    def explicit(self, explicit: str | None) -> "ITunesItemExtensionBuilder":
        self._explicit = explicit
        return self

    def closed_captioned(self, closed_captioned: str | None) -> "ITunesItemExtensionBuilder":
        self._closed_captioned = closed_captioned
        return self

    def order(self, order: str | None) -> "ITunesItemExtensionBuilder":
        self._order = order
        return self

    def subtitle(self, subtitle: str | None) -> "ITunesItemExtensionBuilder":
        self._subtitle = subtitle
        return self

    def summary(self, summary: str | None) -> "ITunesItemExtensionBuilder":
        self._summary = summary
        return self

    def keywords(self, keywords: str | None) -> "ITunesItemExtensionBuilder":
        self._keywords = keywords
        return self

    @logs_rejection
    def validate(self) -> "ITunesItemExtensionBuilder":
        if self._image is not None:
            str_to_url(self._image, "ITunesItemExtension.image")

        if self._duration is not None and not _DURATION_RE.match(self._duration):
            raise FeedValidationError(
                "ITunesItemExtension.duration",
                f"{self._duration!r} is not SS, MM:SS or HH:MM:SS",
                self._duration,
            )

        _check_explicit(self._explicit, "ITunesItemExtension.explicit")

        if self._order is not None and not _ORDER_RE.fullmatch(self._order):
            raise OutOfRangeError(
                self._order, "a non-negative integer", "ITunesItemExtension.order"
            )

        return self

    def finalize(self) -> ITunesItemExtension:
        return ITunesItemExtension(
            author=self._author,
            block=self._block,
            image=self._image,
            duration=self._duration,
            explicit=self._explicit,
            closed_captioned=self._closed_captioned,
            order=self._order,
            subtitle=self._subtitle,
            summary=self._summary,
            keywords=self._keywords,
        )
