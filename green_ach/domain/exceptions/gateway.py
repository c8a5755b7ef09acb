"""Transport, parsing and SOAP exceptions."""

from .base import GatewayException


class GatewayTransportException(GatewayException):
    """Raised when the HTTP call to the ACH service fails."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message=message,
            code="GATEWAY_TRANSPORT_ERROR",
        )
        self.status_code = status_code


class GatewayTimeoutException(GatewayTransportException):
    """Raised when connecting to the ACH service times out."""

    def __init__(self, detail: str = "Connection to the ACH service timed out"):
        super().__init__(message=detail, status_code=None)
        self.code = "GATEWAY_TIMEOUT"


class ResponseParseException(GatewayException):
    """Raised when a response does not fit the expected fields."""

    def __init__(self, message: str, response: str | None = None):
        super().__init__(
            message=message,
            code="RESPONSE_PARSE_ERROR",
        )
        self.response = response


class SoapRequestException(GatewayException):
    """Raised when a SOAP call fails."""

    def __init__(
        self,
        message: str,
        last_request: str | None = None,
        last_response: str | None = None,
    ):
        super().__init__(
            message=message,
            code="SOAP_REQUEST_ERROR",
        )
        self.last_request = last_request
        self.last_response = last_response
