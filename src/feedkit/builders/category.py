"""Builder for the <category> element of channels and items."""

from feedkit.builders.base import logs_rejection
from feedkit.exceptions import MissingFieldError
from feedkit.models.elements import Category
from feedkit.utils.string_utils import str_to_url


class CategoryBuilder:
    """Assembles a Category with an optional taxonomy domain."""

    def __init__(self) -> None:
        self._name = ""
        self._domain: str | None = None

    def name(self, name: str) -> "CategoryBuilder":
        self._name = name
        return self

    def domain(self, domain: str | None) -> "CategoryBuilder":
        self._domain = domain
        return self

    @logs_rejection
    def validate(self) -> "CategoryBuilder":
        """Require a non-empty name; a present domain must be a URL."""
        if not self._name:
            raise MissingFieldError("Category.name")

        if self._domain is not None:
            str_to_url(self._domain, "Category.domain")

        return self

    def finalize(self) -> Category:
        return Category(name=self._name, domain=self._domain)
