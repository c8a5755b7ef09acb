"""Vendor API method names and the ordered fields each one returns."""

from enum import Enum
from typing import Dict, Tuple


class ApiMethod(str, Enum):
    """ACHService methods wrapped by the gateway."""

    SINGLE_CREDIT = "SingleCreditTransaction"
    SINGLE_DEBIT = "SingleDebitTransaction"
    TRANSACTION_STATUS = "TransactionStatus"
    VOID = "VoidTransaction"
    REFUND = "RefundTransaction"
    INBOUND_BATCH = "inboundBatch"


TRANSACTION_RESULT: Tuple[str, ...] = (
    "Result",
    "ResultDescription",
    "ACHTransaction_ID",
)

TRANSACTION_STATUS_RESULT: Tuple[str, ...] = (
    "Result",
    "ResultDescription",
    "ACHTransaction_ID",
    "ACHTransactionType",
    "Currency",
    "Amount",
    "Routing",
    "Account",
    "AccountType",
    "TransactionDate",
    "Name",
    "SameDay",
    "Processed",
    "ProcessedTime",
    "Returned",
    "ReturnedTime",
)

REFUND_RESULT: Tuple[str, ...] = (
    "Result",
    "ResultDescription",
    "ACHTransaction_ID",
    "RefundACHTransaction_ID",
)

INBOUND_BATCH_RESULT: Tuple[str, ...] = (
    "Result",
    "ResultDescription",
    "ACHInboundBatch_ID",
)

RESULT_SCHEMAS: Dict[ApiMethod, Tuple[str, ...]] = {
    ApiMethod.SINGLE_CREDIT: TRANSACTION_RESULT,
    ApiMethod.SINGLE_DEBIT: TRANSACTION_RESULT,
    ApiMethod.TRANSACTION_STATUS: TRANSACTION_STATUS_RESULT,
    ApiMethod.VOID: TRANSACTION_RESULT,
    ApiMethod.REFUND: REFUND_RESULT,
    ApiMethod.INBOUND_BATCH: INBOUND_BATCH_RESULT,
}
