"""HTTP and SOAP implementation of ACHGatewayClient."""

from enum import Enum
from typing import Any, Callable, Dict, Mapping, Sequence

import httpx
import structlog
from suds.client import Client as SoapClient

from green_ach.core.config import GatewaySettings, get_settings
from green_ach.core.metrics import (
    record_request_failure,
    record_request_success,
    track_request_latency,
)
from green_ach.domain.entities import (
    RESULT_SCHEMAS,
    ApiMethod,
    ErrorKind,
    GatewayConfig,
    GatewayError,
    GatewayResult,
    InboundBatchRequest,
    ResponseFormat,
    TransactionRequest,
)
from green_ach.domain.exceptions import (
    GatewayTimeoutException,
    GatewayTransportException,
    ResponseParseException,
)
from green_ach.domain.interfaces import ACHGatewayClient

from .parsing import flatten_soap_result, parse_delimited

logger = structlog.get_logger(__name__)

DEFAULT_CONNECT_TIMEOUT = 3.0
DEFAULT_DELIM_CHAR = ","

SoapClientFactory = Callable[[str], Any]


def _method_name(method: ApiMethod | str) -> str:
    return method.value if isinstance(method, Enum) else method


def _with_credentials(
    options: Mapping[str, Any],
    config: GatewayConfig,
) -> Dict[str, Any]:
    fields = dict(options)
    if fields.get("Client_ID") is None:
        fields["Client_ID"] = config.client_id
    if fields.get("ApiPassword") is None:
        fields["ApiPassword"] = config.api_password
    return fields


def _wants_delimited(fields: Mapping[str, Any]) -> bool:
    return str(fields.get("x_delim_data") or "").upper() == "TRUE"


def _default_keys(name: str) -> Sequence[str]:
    try:
        return RESULT_SCHEMAS[ApiMethod(name)]
    except ValueError:
        return ()


def _document_text(document: Any) -> str | None:
    return None if document is None else str(document)


class ACHGateway(ACHGatewayClient):
    """
    Client for the Green ACH service.

    Every call posts form fields to ``{endpoint}/{method}`` and parses the
    delimited reply, or goes through the SOAP interface described by
    ``{endpoint}?wsdl``. Failures never raise: they come back as a failed
    GatewayResult and are also kept as the config's last error.

    Not thread-safe: calls share the mutable GatewayConfig without locking.
    """

    def __init__(
        self,
        config: GatewayConfig,
        connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
        soap_client_factory: SoapClientFactory | None = None,
    ):
        self._config = config
        self._connect_timeout = connect_timeout
        self._transport = transport
        self._soap_client_factory = soap_client_factory or SoapClient

    @classmethod
    def from_credentials(
        cls,
        client_id: str,
        api_password: str,
        live: bool = True,
        **kwargs: Any,
    ) -> "ACHGateway":
        """Create a gateway from a Client_ID and ApiPassword pair."""
        config = GatewayConfig(client_id=client_id, api_password=api_password, live=live)
        return cls(config, **kwargs)

    @classmethod
    def from_settings(
        cls,
        settings: GatewaySettings | None = None,
        **kwargs: Any,
    ) -> "ACHGateway":
        """Create a gateway configured from GREEN_* environment variables."""
        settings = settings or get_settings()
        kwargs.setdefault("connect_timeout", settings.connect_timeout)
        return cls(GatewayConfig.from_settings(settings), **kwargs)

    @property
    def config(self) -> GatewayConfig:
        return self._config

    @property
    def endpoint(self) -> str:
        return self._config.endpoint

    def live_mode(self) -> None:
        self._config.live_mode()

    def test_mode(self) -> None:
        self._config.test_mode()

    def get_last_error(self) -> str:
        return self._config.get_last_error()

    def __str__(self) -> str:
        return self._config.describe()

    # =========================================================================
    # Generic invokers
    # =========================================================================

    def request(
        self,
        method: ApiMethod | str,
        options: Mapping[str, Any],
        result_keys: Sequence[str] = (),
    ) -> GatewayResult:
        """
        Call any API method by form POST.

        Usable directly for methods without a typed wrapper.

        Args:
            method: API method name, e.g. "TransactionStatus"
            options: Vendor field name to value; Client_ID and ApiPassword
                are filled from the config unless given
            result_keys: Names of the delimited response fields, in order.
                Defaults to the known schema for ``method``.

        Returns:
            Parsed fields, or the raw delimited string if ``options`` set
            x_delim_data to "TRUE"
        """
        name = _method_name(method)
        fields = _with_credentials(options, self._config)

        # The reply is always requested delimited so it can be parsed;
        # the caller's x_delim_data only picks what is handed back.
        return_delimited = _wants_delimited(fields)
        fields["x_delim_data"] = "TRUE"
        delim_char = fields.get("x_delim_char") or DEFAULT_DELIM_CHAR
        fields["x_delim_char"] = delim_char

        url = f"{self._config.endpoint}/{name}"

        try:
            with track_request_latency(name):
                body = self._post(url, fields)
        except GatewayTransportException as e:
            return self._fail(
                name,
                GatewayError(
                    kind=ErrorKind.TRANSPORT,
                    message=f"Request failed: {e.message}",
                ),
            )

        if return_delimited:
            record_request_success(name)
            return GatewayResult.ok(body)

        keys = result_keys or _default_keys(name)

        try:
            parsed = parse_delimited(body, delim_char, keys)
        except ResponseParseException as e:
            return self._fail(
                name,
                GatewayError(
                    kind=ErrorKind.PARSE,
                    message=(
                        "An error occurred while attempting to parse "
                        f"the API result: {e.message}"
                    ),
                ),
            )

        record_request_success(name)
        return GatewayResult.ok(parsed)

    def request_soap(
        self,
        method: ApiMethod | str,
        options: Mapping[str, Any],
    ) -> GatewayResult:
        """
        Call any API method through the SOAP interface.

        Same contract as ``request``. The SOAP reply is flattened into
        a field mapping, or joined with x_delim_char when the caller
        asked for delimited output.
        """
        name = _method_name(method)
        fields = _with_credentials(options, self._config)

        # SOAP replies must come back as XML
        return_delimited = _wants_delimited(fields)
        fields["x_delim_data"] = ""
        delim_char = fields.get("x_delim_char") or DEFAULT_DELIM_CHAR
        fields["x_delim_char"] = delim_char

        wsdl = f"{self._config.endpoint}?wsdl"
        client = None

        logger.info("ach_soap_request_sent", method=name, mode=self._config.mode.value)

        try:
            with track_request_latency(name):
                client = self._soap_client_factory(wsdl)
                reply = getattr(client.service, name)(**fields)
            values = flatten_soap_result(reply)
        except Exception as e:
            last_request = _document_text(client.last_sent()) if client else None
            last_response = _document_text(client.last_received()) if client else None
            return self._fail(
                name,
                GatewayError(
                    kind=ErrorKind.SOAP,
                    message=(
                        f"SOAP Request failed with error: {e}\n"
                        f"{last_request or ''}\n{last_response or ''}"
                    ),
                    last_request=last_request,
                    last_response=last_response,
                ),
            )

        record_request_success(name)
        if return_delimited:
            return GatewayResult.ok(delim_char.join(values.values()))
        return GatewayResult.ok(values)

    def _post(self, url: str, fields: Mapping[str, Any]) -> str:
        """Send one form POST; no overall timeout beyond the connect limit."""
        timeout = httpx.Timeout(None, connect=self._connect_timeout)

        logger.info("ach_request_sent", url=url, mode=self._config.mode.value)

        try:
            with httpx.Client(timeout=timeout, transport=self._transport) as client:
                response = client.post(url, data=fields)
        except httpx.TimeoutException as e:
            raise GatewayTimeoutException(
                f"Connection to {url} timed out: {e}"
            ) from e
        except httpx.HTTPError as e:
            raise GatewayTransportException(
                f"{type(e).__name__}: {e}"
            ) from e

        if response.status_code >= 400:
            raise GatewayTransportException(
                f"ACH service returned HTTP {response.status_code}: "
                f"{response.text[:200]}",
                status_code=response.status_code,
            )

        logger.info(
            "ach_request_completed",
            url=url,
            status_code=response.status_code,
        )
        return response.text

    def _fail(self, method: str, error: GatewayError) -> GatewayResult:
        self._config.set_last_error(error.message)
        record_request_failure(method, error.kind.value)
        logger.error(
            "ach_request_failed",
            method=method,
            error_kind=error.kind.value,
            error=error.message.splitlines()[0],
        )
        return GatewayResult.err(error)

    # =========================================================================
    # Typed operations
    # =========================================================================

    def single_credit(
        self,
        txn: TransactionRequest,
        fmt: ResponseFormat = ResponseFormat(),
    ) -> GatewayResult:
        return self.request(
            ApiMethod.SINGLE_CREDIT,
            {**txn.to_fields(), **fmt.to_fields()},
            RESULT_SCHEMAS[ApiMethod.SINGLE_CREDIT],
        )

    def single_debit(
        self,
        txn: TransactionRequest,
        fmt: ResponseFormat = ResponseFormat(),
    ) -> GatewayResult:
        return self.request(
            ApiMethod.SINGLE_DEBIT,
            {**txn.to_fields(), **fmt.to_fields()},
            RESULT_SCHEMAS[ApiMethod.SINGLE_DEBIT],
        )

    def transaction_status(
        self,
        txn_id: str,
        fmt: ResponseFormat = ResponseFormat(),
    ) -> GatewayResult:
        return self.request(
            ApiMethod.TRANSACTION_STATUS,
            {"Transaction_ID": txn_id, **fmt.to_fields()},
            RESULT_SCHEMAS[ApiMethod.TRANSACTION_STATUS],
        )

    def void_transaction(
        self,
        txn_id: str,
        fmt: ResponseFormat = ResponseFormat(),
    ) -> GatewayResult:
        return self.request(
            ApiMethod.VOID,
            {"Transaction_ID": txn_id, **fmt.to_fields()},
            RESULT_SCHEMAS[ApiMethod.VOID],
        )

    def refund_transaction(
        self,
        txn_id: str,
        fmt: ResponseFormat = ResponseFormat(),
    ) -> GatewayResult:
        return self.request(
            ApiMethod.REFUND,
            {"Transaction_ID": txn_id, **fmt.to_fields()},
            RESULT_SCHEMAS[ApiMethod.REFUND],
        )

    def inbound_batch(
        self,
        batch: InboundBatchRequest,
        fmt: ResponseFormat = ResponseFormat(),
    ) -> GatewayResult:
        return self.request(
            ApiMethod.INBOUND_BATCH,
            {**batch.to_fields(), **fmt.to_fields()},
            RESULT_SCHEMAS[ApiMethod.INBOUND_BATCH],
        )
