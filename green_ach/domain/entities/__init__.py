"""Gateway Entities - Configuration, request parameters and results."""

from .config import DEFAULT_ENDPOINTS, EndpointMode, GatewayConfig
from .requests import (
    AccountType,
    InboundBatchRequest,
    ResponseFormat,
    TransactionRequest,
)
from .result import ErrorKind, GatewayError, GatewayResult
from .schemas import (
    INBOUND_BATCH_RESULT,
    REFUND_RESULT,
    RESULT_SCHEMAS,
    TRANSACTION_RESULT,
    TRANSACTION_STATUS_RESULT,
    ApiMethod,
)

__all__ = [
    "DEFAULT_ENDPOINTS",
    "EndpointMode",
    "GatewayConfig",
    "AccountType",
    "InboundBatchRequest",
    "ResponseFormat",
    "TransactionRequest",
    "ErrorKind",
    "GatewayError",
    "GatewayResult",
    "ApiMethod",
    "RESULT_SCHEMAS",
    "TRANSACTION_RESULT",
    "TRANSACTION_STATUS_RESULT",
    "REFUND_RESULT",
    "INBOUND_BATCH_RESULT",
]
