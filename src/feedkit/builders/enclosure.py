"""Builder for the <enclosure> element."""

from feedkit.builders.base import logs_rejection
from feedkit.models.elements import Enclosure
from feedkit.utils.string_utils import int_to_string, parse_mime_type, str_to_url


class EnclosureBuilder:
    """Assembles an Enclosure.

    Example:
        >>> enclosure = (
        ...     EnclosureBuilder()
        ...     .url("http://www.podtrac.com/pts/redirect.ogg/traffic.libsyn.com/jnite/las408.ogg")
        ...     .length(70772893)
        ...     .mime_type("audio/ogg")
        ...     .validate()
        ...     .finalize()
        ... )
        >>> enclosure.length
        '70772893'
    """

    def __init__(self) -> None:
        self._url = ""
        self._length = 0
        self._mime_type = ""

    def url(self, url: str) -> "EnclosureBuilder":
        self._url = url
        return self

    def length(self, length: int) -> "EnclosureBuilder":
        """Set the media size in bytes."""
        self._length = length
        return self

    def mime_type(self, mime_type: str) -> "EnclosureBuilder":
        self._mime_type = mime_type
        return self

    @logs_rejection
    def validate(self) -> "EnclosureBuilder":
        """Check url, mime_type and length, in that order.

        Raises:
            InvalidUrlError: url is not an absolute URL.
            InvalidMimeTypeError: mime_type does not parse.
            NegativeValueError: length is below zero.
        """
        str_to_url(self._url, "Enclosure.url")
        parse_mime_type(self._mime_type, "Enclosure.mime_type")
        int_to_string(self._length, "Enclosure.length")
        return self

    def finalize(self) -> Enclosure:
        """Construct the Enclosure.

        The length conversion runs here too, so a negative length is
        rejected even when validate() was skipped.
        """
        length = int_to_string(self._length, "Enclosure.length")

        return Enclosure(
            url=self._url,
            length=length,
            mime_type=self._mime_type,
        )
