"""Command line entry point.

Fetches (or reads) a feed, validates it through the builders and prints
a summary of the resulting channel.
"""

import argparse
import asyncio
import sys
from pathlib import Path

from feedkit.config.settings import settings
from feedkit.exceptions import FeedError
from feedkit.models.channel import Channel
from feedkit.parsers.rss_parser import RssParser
from feedkit.services.feed_service import FeedService
from feedkit.sources.http import HttpFeedSource
from feedkit.utils.logger import configure_logging, get_logger


async def load_channel(url: str, strict: bool) -> Channel:
    """Fetch and parse a remote feed."""
    source = HttpFeedSource(
        url=url,
        timeout=settings.fetch_timeout,
        user_agent=settings.user_agent,
    )
    service = FeedService(source=source, parser=RssParser(strict=strict))
    return await service.fetch_channel()


def format_summary(channel: Channel) -> str:
    """Render a short human-readable summary of a channel."""
    lines = [
        f"Title:       {channel.title}",
        f"Link:        {channel.link}",
        f"Description: {channel.description}",
    ]
    if channel.language:
        lines.append(f"Language:    {channel.language}")
    if channel.pub_date:
        lines.append(f"Published:   {channel.pub_date}")
    if channel.categories:
        lines.append("Categories:  " + ", ".join(c.name for c in channel.categories))
    lines.append(f"Items:       {len(channel.items)}")

    for item in channel.items:
        label = item.title or (item.description or "")[:60]
        lines.append(f"  - {label}")
        if item.enclosure:
            lines.append(f"    {item.enclosure.mime_type} {item.enclosure.url}")

    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="feedkit - validated RSS reader")
    parser.add_argument("location", help="Feed URL, or a file path with --file")
    parser.add_argument(
        "--file",
        action="store_true",
        help="Read the feed from a local file instead of fetching it",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=settings.strict_parsing,
        help="Fail on the first invalid element instead of skipping it",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the channel as JSON",
    )
    args = parser.parse_args(argv)

    configure_logging(
        log_level=settings.log_level,
        json_format=settings.log_json,
    )
    logger = get_logger("cli")

    try:
        if args.file:
            raw = Path(args.location).read_bytes()
            channel = RssParser(strict=args.strict).parse(raw, args.location)
        else:
            channel = asyncio.run(load_channel(args.location, args.strict))
    except (FeedError, OSError) as e:
        logger.error("Could not load feed", location=args.location, error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(channel.model_dump_json(indent=2))
    else:
        print(format_summary(channel))
    return 0


if __name__ == "__main__":
    sys.exit(main())
