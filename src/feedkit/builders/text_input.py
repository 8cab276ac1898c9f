"""Builder for the channel <textInput> element."""

from feedkit.builders.base import logs_rejection
from feedkit.models.elements import TextInput
from feedkit.utils.string_utils import str_to_url


class TextInputBuilder:
    def __init__(self) -> None:
        self._title = ""
        self._description = ""
        self._name = ""
        self._link = ""

    def title(self, title: str) -> "TextInputBuilder":
        self._title = title
        return self

    def description(self, description: str) -> "TextInputBuilder":
        self._description = description
        return self

    def name(self, name: str) -> "TextInputBuilder":
        self._name = name
        return self

    def link(self, link: str) -> "TextInputBuilder":
        self._link = link
        return self

    @logs_rejection
    def validate(self) -> "TextInputBuilder":
        str_to_url(self._link, "TextInput.link")
        return self

    def finalize(self) -> TextInput:
        return TextInput(
            title=self._title,
            description=self._description,
            name=self._name,
            link=self._link,
        )
