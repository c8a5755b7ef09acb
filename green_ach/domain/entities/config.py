"""Gateway configuration entity holding credentials and endpoint mode."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict

from green_ach.core.config import LIVE_ENDPOINT, TEST_ENDPOINT, GatewaySettings


class EndpointMode(str, Enum):
    """Which vendor system calls are sent to."""

    TEST = "test"  # Sandbox, no charges
    LIVE = "live"


DEFAULT_ENDPOINTS: Dict[EndpointMode, str] = {
    EndpointMode.TEST: TEST_ENDPOINT,
    EndpointMode.LIVE: LIVE_ENDPOINT,
}


def _mask(secret: str) -> str:
    if len(secret) <= 4:
        return "*" * len(secret)
    return "*" * (len(secret) - 4) + secret[-4:]


@dataclass
class GatewayConfig:
    """
    Mutable credentials and endpoint selection for one gateway.

    The active endpoint is always derived from ``live``, so switching
    modes can never leave a stale URL behind. Instances are not
    thread-safe; share one across threads only if nothing mutates it.

    Attributes:
        client_id: Numeric Client_ID issued by the vendor
        api_password: System generated ApiPassword
        live: True to call the live system, False for the sandbox
        endpoints: Base URL per mode
        last_error: Description of the most recent failed call
    """

    client_id: str
    api_password: str = field(repr=False)
    live: bool = True
    endpoints: Dict[EndpointMode, str] = field(
        default_factory=lambda: dict(DEFAULT_ENDPOINTS),
        repr=False,
    )
    last_error: str = ""

    @classmethod
    def from_settings(cls, settings: GatewaySettings) -> "GatewayConfig":
        """Build a config from environment settings."""
        return cls(
            client_id=settings.client_id,
            api_password=settings.api_password,
            live=settings.live,
            endpoints={
                EndpointMode.TEST: settings.test_endpoint,
                EndpointMode.LIVE: settings.live_endpoint,
            },
        )

    @property
    def mode(self) -> EndpointMode:
        return EndpointMode.LIVE if self.live else EndpointMode.TEST

    @property
    def endpoint(self) -> str:
        """Base URL of the currently active system."""
        return self.endpoints[self.mode]

    def get_endpoint(self) -> str:
        return self.endpoint

    def set_client_id(self, client_id: str) -> None:
        self.client_id = client_id

    def get_client_id(self) -> str:
        return self.client_id

    def set_api_password(self, api_password: str) -> None:
        self.api_password = api_password

    def get_api_password(self) -> str:
        return self.api_password

    def live_mode(self) -> None:
        """Send subsequent calls to the live system."""
        self.live = True

    def test_mode(self) -> None:
        """Send subsequent calls to the sandbox so nothing is charged."""
        self.live = False

    def set_last_error(self, error: str) -> None:
        self.last_error = error

    def get_last_error(self) -> str:
        return self.last_error

    def describe(self, html: bool = False) -> str:
        """
        Human-readable summary of the configuration.

        The API password is masked down to its last four characters.
        With ``html`` set, every line break is preceded by ``<br />``.
        """
        summary = (
            "Gateway Type: POST\n"
            f"Endpoint: {self.endpoint}\n"
            f"Client ID: {self.client_id}\n"
            f"ApiPassword: {_mask(self.api_password)}\n"
        )
        if html:
            return summary.replace("\n", "<br />\n")
        return summary

    def __str__(self) -> str:
        return self.describe()
