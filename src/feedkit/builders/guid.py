"""Builder for the item <guid> element."""

from feedkit.builders.base import logs_rejection
from feedkit.exceptions import MissingFieldError
from feedkit.models.elements import Guid


class GuidBuilder:
    """Assembles a Guid.

    is_permalink follows the RSS default of True when unset or set to None.
    """

    def __init__(self) -> None:
        self._value = ""
        self._is_permalink: bool | None = None

    def value(self, value: str) -> "GuidBuilder":
        self._value = value
        return self

    def is_permalink(self, is_permalink: bool | None) -> "GuidBuilder":
        self._is_permalink = is_permalink
        return self

    @logs_rejection
    def validate(self) -> "GuidBuilder":
        if not self._value:
            raise MissingFieldError("Guid.value")
        return self

    def finalize(self) -> Guid:
        is_permalink = True if self._is_permalink is None else self._is_permalink
        return Guid(value=self._value, is_permalink=is_permalink)
