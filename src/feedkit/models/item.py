"""RSS item model."""

from pydantic import BaseModel, Field

from feedkit.models.elements import Category, Enclosure, Guid, Source
from feedkit.models.itunes import ITunesItemExtension


class Item(BaseModel):
    """A single <item> of a channel.

    Owns its enclosure, guid, source, categories and iTunes extension.
    """

    title: str | None = Field(default=None)
    link: str | None = Field(default=None)
    description: str | None = Field(default=None)
    author: str | None = Field(default=None, description="Author email address")
    categories: tuple[Category, ...] = Field(default_factory=tuple)
    comments: str | None = Field(default=None, description="URL of the comments page")
    enclosure: Enclosure | None = Field(default=None)
    guid: Guid | None = Field(default=None)
    pub_date: str | None = Field(default=None, description="RFC 2822 publication date")
    source: Source | None = Field(default=None)
    itunes_ext: ITunesItemExtension | None = Field(default=None)

    model_config = {"frozen": True}
