"""Gateway Exceptions - Transport, parsing and SOAP failures."""

from .base import GatewayException
from .gateway import (
    GatewayTimeoutException,
    GatewayTransportException,
    ResponseParseException,
    SoapRequestException,
)

__all__ = [
    "GatewayException",
    "GatewayTransportException",
    "GatewayTimeoutException",
    "ResponseParseException",
    "SoapRequestException",
]
