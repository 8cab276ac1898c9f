"""RSS channel model, the root of the feed tree."""

from pydantic import BaseModel, Field

from feedkit.models.elements import Category, Cloud, Image, TextInput
from feedkit.models.item import Item
from feedkit.models.itunes import ITunesChannelExtension


class Channel(BaseModel):
    """An RSS <channel> with its items.

    Required text fields default to empty strings; every list field is a
    tuple that may be empty but is never None.
    """

    # Required elements
    title: str = Field(default="")
    link: str = Field(default="")
    description: str = Field(default="")

    # Optional elements
    language: str | None = Field(default=None)
    copyright: str | None = Field(default=None)
    managing_editor: str | None = Field(default=None)
    webmaster: str | None = Field(default=None)
    pub_date: str | None = Field(default=None, description="RFC 2822 publication date")
    last_build_date: str | None = Field(default=None, description="RFC 2822 date")
    categories: tuple[Category, ...] = Field(default_factory=tuple)
    generator: str | None = Field(default=None)
    docs: str | None = Field(default=None)
    cloud: Cloud | None = Field(default=None)
    ttl: str | None = Field(default=None, description="Minutes to cache, as decimal text")
    image: Image | None = Field(default=None)
    rating: str | None = Field(default=None, description="PICS rating")
    text_input: TextInput | None = Field(default=None)
    skip_hours: tuple[str, ...] = Field(default_factory=tuple)
    skip_days: tuple[str, ...] = Field(default_factory=tuple)

    items: tuple[Item, ...] = Field(default_factory=tuple)
    itunes_ext: ITunesChannelExtension | None = Field(default=None)

    model_config = {"frozen": True}
