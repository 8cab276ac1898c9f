"""Builder for the channel <cloud> element."""

from feedkit.builders.base import logs_rejection
from feedkit.exceptions import OutOfRangeError
from feedkit.models.elements import Cloud
from feedkit.utils.string_utils import int_to_string, str_to_url

# Protocols allowed by the RSS 2.0 <cloud> definition
CLOUD_PROTOCOLS = ("xml-rpc", "soap", "http-post")


class CloudBuilder:
    """Assembles a Cloud registration.

    Example:
        >>> cloud = (
        ...     CloudBuilder()
        ...     .domain("http://rpc.sys.com/")
        ...     .port(80)
        ...     .path("/RPC2")
        ...     .register_procedure("pingMe")
        ...     .protocol("soap")
        ...     .validate()
        ...     .finalize()
        ... )
        >>> cloud.port
        '80'
    """

    def __init__(self) -> None:
        self._domain = ""
        self._port = 0
        self._path = ""
        self._register_procedure = ""
        self._protocol = ""

    def domain(self, domain: str) -> "CloudBuilder":
        self._domain = domain
        return self

    def port(self, port: int) -> "CloudBuilder":
        self._port = port
        return self

    def path(self, path: str) -> "CloudBuilder":
        self._path = path
        return self

    def register_procedure(self, register_procedure: str) -> "CloudBuilder":
        self._register_procedure = register_procedure
        return self

    def protocol(self, protocol: str) -> "CloudBuilder":
        self._protocol = protocol
        return self

    @logs_rejection
    def validate(self) -> "CloudBuilder":
        """Check domain, port and protocol.

        Raises:
            InvalidUrlError: domain is not an absolute URL.
            NegativeValueError: port is below zero.
            OutOfRangeError: protocol is not xml-rpc, soap or http-post.
        """
        str_to_url(self._domain, "Cloud.domain")
        int_to_string(self._port, "Cloud.port")

        if self._protocol.lower() not in CLOUD_PROTOCOLS:
            raise OutOfRangeError(self._protocol, ", ".join(CLOUD_PROTOCOLS), "Cloud.protocol")

        return self

    def finalize(self) -> Cloud:
        port = int_to_string(self._port, "Cloud.port")

        return Cloud(
            domain=self._domain,
            port=port,
            path=self._path,
            register_procedure=self._register_procedure,
            protocol=self._protocol,
        )
