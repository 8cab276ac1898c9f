"""Custom exceptions for feedkit.

Provides a structured exception hierarchy for validation failures raised by
the builders and for errors in the fetch/parse layer.
"""

from typing import Any


class FeedError(Exception):
    """Base exception class for all feedkit errors."""

    pass


class FeedValidationError(FeedError):
    """Raised when a builder value violates a feed format constraint.

    Attributes:
        field: Name of the offending field, e.g. 'Enclosure.length'.
        value: The rejected value.
    """

    def __init__(self, field: str | None, message: str, value: Any = None):
        self.field = field
        self.value = value
        self.message = message
        if field:
            super().__init__(f"{field}: {message}")
        else:
            super().__init__(message)


class InvalidUrlError(FeedValidationError):
    """Raised when a value is not an absolute URL."""

    def __init__(self, value: str, field: str | None = None, reason: str | None = None):
        message = f"{value!r} is not a valid URL"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(field, message, value)


class InvalidMimeTypeError(FeedValidationError):
    """Raised when a value does not parse as a MIME type."""

    def __init__(self, value: str, field: str | None = None):
        super().__init__(field, f"{value!r} is not a valid MIME type", value)


class NegativeValueError(FeedValidationError):
    """Raised when a non-negative numeric field receives a negative value."""

    def __init__(self, value: int, field: str | None = None):
        super().__init__(field, f"{value} cannot be a negative value", value)


class OutOfRangeError(FeedValidationError):
    """Raised when a value falls outside its allowed range or enumeration."""

    def __init__(self, value: Any, allowed: str, field: str | None = None):
        self.allowed = allowed
        super().__init__(field, f"{value!r} is not allowed, expected {allowed}", value)


class InvalidDateError(FeedValidationError):
    """Raised when a date string does not follow RFC 2822."""

    def __init__(self, value: str, field: str | None = None):
        super().__init__(field, f"{value!r} is not a valid RFC 2822 date", value)


class MissingFieldError(FeedValidationError):
    """Raised when a required field is absent or empty."""

    def __init__(self, field: str, message: str = "a non-empty value is required"):
        super().__init__(field, message)


class FetchError(FeedError):
    """Raised when feed retrieval fails.

    Attributes:
        source_id: The identifier of the feed source that failed.
    """

    def __init__(self, source_id: str, message: str):
        self.source_id = source_id
        super().__init__(f"Failed to fetch {source_id}: {message}")


class ParseError(FeedError):
    """Raised when feed content cannot be turned into a valid channel.

    Attributes:
        source_id: The identifier of the feed source with parse error.
    """

    def __init__(self, source_id: str, message: str):
        self.source_id = source_id
        super().__init__(f"Failed to parse {source_id}: {message}")
