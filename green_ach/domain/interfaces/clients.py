"""ACH gateway client interface."""

from abc import ABC, abstractmethod

from green_ach.domain.entities import (
    GatewayResult,
    InboundBatchRequest,
    ResponseFormat,
    TransactionRequest,
)


class ACHGatewayClient(ABC):
    """
    Abstract client for the ACH payment service.

    Every operation returns a GatewayResult instead of raising;
    callers inspect ``result.error`` to learn why a call failed.
    """

    @abstractmethod
    def single_credit(
        self,
        txn: TransactionRequest,
        fmt: ResponseFormat = ResponseFormat(),
    ) -> GatewayResult:
        """
        Insert a single ACH credit from the merchant to a customer account.

        Args:
            txn: Customer, bank and payment details
            fmt: Requested result format

        Returns:
            Result, ResultDescription and ACHTransaction_ID on success
        """
        ...

    @abstractmethod
    def single_debit(
        self,
        txn: TransactionRequest,
        fmt: ResponseFormat = ResponseFormat(),
    ) -> GatewayResult:
        """
        Insert a single ACH debit from a customer account to the merchant.

        Args:
            txn: Customer, bank and payment details
            fmt: Requested result format

        Returns:
            Result, ResultDescription and ACHTransaction_ID on success
        """
        ...

    @abstractmethod
    def transaction_status(
        self,
        txn_id: str,
        fmt: ResponseFormat = ResponseFormat(),
    ) -> GatewayResult:
        """
        Look up processing and return status of a previous transaction.

        Args:
            txn_id: Numeric Transaction_ID of the transaction

        Returns:
            The sixteen status fields described by the vendor
        """
        ...

    @abstractmethod
    def void_transaction(
        self,
        txn_id: str,
        fmt: ResponseFormat = ResponseFormat(),
    ) -> GatewayResult:
        """
        Cancel a transaction that has not been processed yet.

        Args:
            txn_id: Numeric Transaction_ID of the transaction
        """
        ...

    @abstractmethod
    def refund_transaction(
        self,
        txn_id: str,
        fmt: ResponseFormat = ResponseFormat(),
    ) -> GatewayResult:
        """
        Reverse a previous transaction as a refund.

        Args:
            txn_id: Numeric Transaction_ID of the transaction

        Returns:
            Includes the RefundACHTransaction_ID of the new refund
        """
        ...

    @abstractmethod
    def inbound_batch(
        self,
        batch: InboundBatchRequest,
        fmt: ResponseFormat = ResponseFormat(),
    ) -> GatewayResult:
        """
        Upload several transactions as comma delimited text.

        Args:
            batch: Description, file text and header flag

        Returns:
            Result, ResultDescription and ACHInboundBatch_ID on success
        """
        ...
