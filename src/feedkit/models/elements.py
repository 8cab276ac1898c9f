"""Leaf element models for RSS channels and items.

Instances are produced by the matching builders in feedkit.builders and are
frozen once created. Numeric values the RSS format stores as text (port,
length, width, height) are kept as decimal strings.
"""

from pydantic import BaseModel, Field


class Category(BaseModel):
    """<category> element of a channel or item."""

    name: str = Field(default="", description="Category name, e.g. 'Podcast'")
    domain: str | None = Field(default=None, description="Taxonomy URI")

    model_config = {"frozen": True}


class Cloud(BaseModel):
    """<cloud> element: lightweight publish-subscribe registration."""

    domain: str = Field(default="", description="Domain of the cloud service")
    port: str = Field(default="", description="Port, stored as decimal text")
    path: str = Field(default="", description="Path of the registration endpoint")
    register_procedure: str = Field(default="", description="Procedure to call")
    protocol: str = Field(default="", description="xml-rpc, soap or http-post")

    model_config = {"frozen": True}


class Enclosure(BaseModel):
    """<enclosure> element: media object attached to an item."""

    url: str = Field(default="", description="Media URL")
    length: str = Field(default="0", description="Size in bytes, stored as decimal text")
    mime_type: str = Field(default="", description="MIME type, e.g. audio/mpeg")

    model_config = {"frozen": True}


class Guid(BaseModel):
    """<guid> element: unique item identifier."""

    value: str = Field(default="", description="Identifier string")
    is_permalink: bool = Field(default=True, description="Whether value is a permanent URL")

    model_config = {"frozen": True}


class Image(BaseModel):
    """<image> element: channel logo."""

    url: str = Field(default="", description="Image URL (GIF, JPEG or PNG)")
    title: str = Field(default="", description="Image alt text")
    link: str = Field(default="", description="Site URL the image links to")
    width: str | None = Field(default=None, description="Width in pixels, at most 144")
    height: str | None = Field(default=None, description="Height in pixels, at most 400")
    description: str | None = Field(default=None, description="Link title attribute")

    model_config = {"frozen": True}


class Source(BaseModel):
    """<source> element: channel an item came from."""

    url: str = Field(default="", description="URL of the source channel XML")
    title: str | None = Field(default=None, description="Source channel title")

    model_config = {"frozen": True}


class TextInput(BaseModel):
    """<textInput> element: text box displayed with the channel."""

    title: str = Field(default="", description="Label of the submit button")
    description: str = Field(default="", description="Explains the text input area")
    name: str = Field(default="", description="Name of the text object")
    link: str = Field(default="", description="URL of the CGI script processing requests")

    model_config = {"frozen": True}
