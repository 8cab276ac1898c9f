"""feedkit: validated builders and immutable models for RSS feeds."""

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
from feedkit.exceptions import (
    FeedError,
    FeedValidationError,
    FetchError,
    InvalidDateError,
    InvalidMimeTypeError,
    InvalidUrlError,
    MissingFieldError,
    NegativeValueError,
    OutOfRangeError,
    ParseError,
)
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
    ITunesOwner,
    Source,
    TextInput,
)

__version__ = "0.1.0"

__all__ = [
    # Builders
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
    # Models
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
    # Errors
    "FeedError",
    "FeedValidationError",
    "FetchError",
    "InvalidDateError",
    "InvalidMimeTypeError",
    "InvalidUrlError",
    "MissingFieldError",
    "NegativeValueError",
    "OutOfRangeError",
    "ParseError",
]
