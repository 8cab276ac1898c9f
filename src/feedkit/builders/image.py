"""Builder for the channel <image> element."""

from feedkit.builders.base import logs_rejection
from feedkit.exceptions import OutOfRangeError
from feedkit.models.elements import Image
from feedkit.utils.string_utils import int_to_string, str_to_url

# Maximum dimensions allowed by RSS 2.0
MAX_WIDTH = 144
MAX_HEIGHT = 400


class ImageBuilder:
    """Assembles an Image.

    width and height are optional; when present they are stored on the
    finalized Image as decimal strings.
    """

    def __init__(self) -> None:
        self._url = ""
        self._title = ""
        self._link = ""
        self._width: int | None = None
        self._height: int | None = None
        self._description: str | None = None

    def url(self, url: str) -> "ImageBuilder":
        self._url = url
        return self

    def title(self, title: str) -> "ImageBuilder":
        self._title = title
        return self

    def link(self, link: str) -> "ImageBuilder":
        self._link = link
        return self

    def width(self, width: int | None) -> "ImageBuilder":
        self._width = width
        return self

    def height(self, height: int | None) -> "ImageBuilder":
        self._height = height
        return self

    def description(self, description: str | None) -> "ImageBuilder":
        self._description = description
        return self

    @logs_rejection
    def validate(self) -> "ImageBuilder":
        """Check url and link, then the optional dimensions.

        Raises:
            InvalidUrlError: url or link is not an absolute URL.
            NegativeValueError: width or height is below zero.
            OutOfRangeError: width exceeds 144 or height exceeds 400.
        """
        str_to_url(self._url, "Image.url")
        str_to_url(self._link, "Image.link")

        _check_dimension(self._width, MAX_WIDTH, "Image.width")
        _check_dimension(self._height, MAX_HEIGHT, "Image.height")

        return self

    def finalize(self) -> Image:
        width = None if self._width is None else int_to_string(self._width, "Image.width")
        height = None if self._height is None else int_to_string(self._height, "Image.height")

        return Image(
            url=self._url,
            title=self._title,
            link=self._link,
            width=width,
            height=height,
            description=self._description,
        )


def _check_dimension(value: int | None, maximum: int, field: str) -> None:
    if value is None:
        return
    int_to_string(value, field)
    if value > maximum:
        raise OutOfRangeError(value, f"at most {maximum}", field)
