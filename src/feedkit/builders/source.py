"""Builder for the item <source> element."""

from feedkit.builders.base import logs_rejection
from feedkit.models.elements import Source
from feedkit.utils.string_utils import str_to_url


class SourceBuilder:
    """Assembles a Source: the channel an item was republished from."""

    def __init__(self) -> None:
        self._url = ""
        self._title: str | None = None

    def url(self, url: str) -> "SourceBuilder":
        self._url = url
        return self

    def title(self, title: str | None) -> "SourceBuilder":
        self._title = title
        return self

    @logs_rejection
    def validate(self) -> "SourceBuilder":
        str_to_url(self._url, "Source.url")
        return self

    def finalize(self) -> Source:
        return Source(url=self._url, title=self._title)
