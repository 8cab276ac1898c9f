"""Parsers package."""

from feedkit.parsers.base import FeedParser
from feedkit.parsers.rss_parser import RssParser

__all__ = [
    "FeedParser",
    "RssParser",
]
