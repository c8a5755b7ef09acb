"""Base gateway exception."""


class GatewayException(Exception):
    """
    Base exception for all gateway-level errors.

    Gateway exceptions are raised inside the client and converted
    into a failed GatewayResult before reaching the caller.
    """

    def __init__(self, message: str, code: str = "GATEWAY_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)
