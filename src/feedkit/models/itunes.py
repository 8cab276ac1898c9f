"""iTunes podcast namespace extension models."""

from pydantic import BaseModel, Field


ITUNES_NAMESPACE = "http://www.itunes.com/dtds/podcast-1.0.dtd"


class ITunesCategory(BaseModel):
    """<itunes:category>, optionally owning one nested subcategory."""

    text: str = Field(default="", description="Category name, e.g. 'Technology'")
    subcategory: "ITunesCategory | None" = Field(default=None)

    model_config = {"frozen": True}


class ITunesOwner(BaseModel):
    """<itunes:owner> contact information."""

    name: str | None = Field(default=None)
    email: str | None = Field(default=None)

    model_config = {"frozen": True}


class ITunesChannelExtension(BaseModel):
    """iTunes fields attached to a channel."""

    author: str | None = None
    block: str | None = None
    categories: tuple[ITunesCategory, ...] = Field(default_factory=tuple)
    image: str | None = None
    explicit: str | None = None
    complete: str | None = None
    new_feed_url: str | None = None
    owner: ITunesOwner | None = None
    subtitle: str | None = None
    summary: str | None = None
    keywords: str | None = None

    model_config = {"frozen": True}


class ITunesItemExtension(BaseModel):
    """iTunes fields attached to an item (episode)."""

    author: str | None = None
    block: str | None = None
    image: str | None = None
    duration: str | None = None
    explicit: str | None = None
    closed_captioned: str | None = None
    order: str | None = None
    subtitle: str | None = None
    summary: str | None = None
    keywords: str | None = None

    model_config = {"frozen": True}
