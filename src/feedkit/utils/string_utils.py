"""Primitive conversions and format checks shared by the builders.

Every function either returns the converted value or raises a
FeedValidationError subclass naming the rejected value.
"""

import re
from typing import NamedTuple

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from feedkit.exceptions import (
    InvalidMimeTypeError,
    InvalidUrlError,
    NegativeValueError,
    OutOfRangeError,
)

_URL_ADAPTER = TypeAdapter(AnyUrl)

# RFC 2045 token: any CHAR except SPACE, CTLs and tspecials
_TOKEN = r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+"
_QUOTED = r'"(?:[^"\\\r\n]|\\.)*"'
_MIME_RE = re.compile(
    rf"^\s*(?P<type>{_TOKEN})/(?P<subtype>{_TOKEN})"
    rf"(?P<params>(?:\s*;\s*{_TOKEN}=(?:{_TOKEN}|{_QUOTED}))*)\s*;?\s*$"
)
_PARAM_RE = re.compile(rf"({_TOKEN})=({_TOKEN}|{_QUOTED})")


class MimeType(NamedTuple):
    """Parsed MIME type, e.g. audio/ogg; codecs=vorbis."""

    type: str
    subtype: str
    params: dict[str, str]

    @property
    def essence(self) -> str:
        return f"{self.type}/{self.subtype}"


def str_to_url(value: str, field: str | None = None) -> AnyUrl:
    """Parse a string as an absolute URL.

    Args:
        value: Candidate URL string.
        field: Field name used in the error message.

    Returns:
        The parsed URL.

    Raises:
        InvalidUrlError: When the value is empty, relative, or has no host.
    """
    if not value or not value.strip():
        raise InvalidUrlError(value, field, "empty")

    try:
        url = _URL_ADAPTER.validate_python(value)
    except PydanticValidationError as e:
        raise InvalidUrlError(value, field, e.errors()[0]["msg"]) from e

    if not url.host:
        raise InvalidUrlError(value, field, "missing host")

    return url


def int_to_string(value: int, field: str | None = None) -> str:
    """Convert a non-negative integer to its decimal string form.

    Raises:
        OutOfRangeError: When value is a bool rather than an integer.
        NegativeValueError: When value is below zero.
    """
    if isinstance(value, bool):
        raise OutOfRangeError(value, "an integer", field)
    if value < 0:
        raise NegativeValueError(value, field)
    return str(value)


def parse_mime_type(value: str, field: str | None = None) -> MimeType:
    """Parse a MIME type such as 'audio/mpeg' or 'text/html; charset=utf-8'.

    Raises:
        InvalidMimeTypeError: When the value does not match the MIME grammar.
    """
    match = _MIME_RE.match(value or "")
    if not match:
        raise InvalidMimeTypeError(value, field)

    params = {
        key.lower(): raw.strip('"') for key, raw in _PARAM_RE.findall(match.group("params"))
    }
    return MimeType(match.group("type").lower(), match.group("subtype").lower(), params)
