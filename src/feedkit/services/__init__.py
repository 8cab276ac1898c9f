"""Services package."""

from feedkit.services.feed_service import FeedService

__all__ = [
    "FeedService",
]
