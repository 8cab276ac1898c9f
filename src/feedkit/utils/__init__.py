"""Utils package."""

from feedkit.utils.dates import format_rfc2822, parse_rfc2822
from feedkit.utils.logger import configure_logging, get_logger
from feedkit.utils.string_utils import MimeType, int_to_string, parse_mime_type, str_to_url

__all__ = [
    "configure_logging",
    "get_logger",
    "str_to_url",
    "int_to_string",
    "parse_mime_type",
    "MimeType",
    "parse_rfc2822",
    "format_rfc2822",
]
