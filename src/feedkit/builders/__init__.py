"""Builders package."""

from feedkit.builders.base import FeedBuilder
from feedkit.builders.category import CategoryBuilder
from feedkit.builders.channel import ChannelBuilder
from feedkit.builders.cloud import CloudBuilder
from feedkit.builders.enclosure import EnclosureBuilder
from feedkit.builders.guid import GuidBuilder
from feedkit.builders.image import ImageBuilder
from feedkit.builders.item import ItemBuilder
from feedkit.builders.itunes import (
    ITunesCategoryBuilder,
    ITunesChannelExtensionBuilder,
    ITunesItemExtensionBuilder,
    ITunesOwnerBuilder,
)
from feedkit.builders.source import SourceBuilder
from feedkit.builders.text_input import TextInputBuilder

__all__ = [
    "FeedBuilder",
    "CategoryBuilder",
    "ChannelBuilder",
    "CloudBuilder",
    "EnclosureBuilder",
    "GuidBuilder",
    "ImageBuilder",
    "ItemBuilder",
    "SourceBuilder",
    "TextInputBuilder",
    "ITunesCategoryBuilder",
    "ITunesChannelExtensionBuilder",
    "ITunesItemExtensionBuilder",
    "ITunesOwnerBuilder",
]
