"""Sources package."""

from feedkit.sources.base import FeedSource
from feedkit.sources.http import HttpFeedSource

__all__ = [
    "FeedSource",
    "HttpFeedSource",
]
