"""Models package."""

from feedkit.models.channel import Channel
from feedkit.models.elements import Category, Cloud, Enclosure, Guid, Image, Source, TextInput
from feedkit.models.item import Item
from feedkit.models.itunes import (
    ITunesCategory,
    ITunesChannelExtension,
    ITunesItemExtension,
    ITunesOwner,
)

__all__ = [
    "Category",
    "Channel",
    "Cloud",
    "Enclosure",
    "Guid",
    "Image",
    "Item",
    "Source",
    "TextInput",
    "ITunesCategory",
    "ITunesChannelExtension",
    "ITunesItemExtension",
    "ITunesOwner",
]
