"""
Green ACH Gateway - Client wrapper for the Green ACH payment service

A thin synchronous client that builds requests against the vendor's
ACHService methods (single credit/debit, status, void, refund and
inbound batch) and parses the delimited or SOAP responses into
keyed results.
"""

__version__ = "0.1.0"

from green_ach.domain.entities import (  # noqa: E402
    AccountType,
    EndpointMode,
    ErrorKind,
    GatewayConfig,
    GatewayError,
    GatewayResult,
    InboundBatchRequest,
    ResponseFormat,
    TransactionRequest,
)
from green_ach.infrastructure.clients import ACHGateway  # noqa: E402

__all__ = [
    "__version__",
    "ACHGateway",
    "AccountType",
    "EndpointMode",
    "ErrorKind",
    "GatewayConfig",
    "GatewayError",
    "GatewayResult",
    "InboundBatchRequest",
    "ResponseFormat",
    "TransactionRequest",
]
