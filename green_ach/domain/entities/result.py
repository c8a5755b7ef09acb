"""Outcome of a gateway call: a payload or a structured error."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Union

from green_ach.domain.exceptions import (
    GatewayException,
    GatewayTransportException,
    ResponseParseException,
    SoapRequestException,
)


class ErrorKind(str, Enum):
    """Where a call failed."""

    TRANSPORT = "transport"  # Connection, timeout or HTTP status failure
    PARSE = "parse"  # Response did not fit the expected fields
    SOAP = "soap"  # SOAP client or fault


@dataclass(frozen=True)
class GatewayError:
    """
    Structured description of a failed call.

    Attributes:
        kind: Failure category
        message: Human-readable detail, also stored as the gateway's last error
        last_request: SOAP request envelope, when available
        last_response: SOAP response envelope, when available
    """

    kind: ErrorKind
    message: str
    last_request: str | None = None
    last_response: str | None = None

    def to_exception(self) -> GatewayException:
        if self.kind is ErrorKind.TRANSPORT:
            return GatewayTransportException(self.message)
        if self.kind is ErrorKind.PARSE:
            return ResponseParseException(self.message)
        return SoapRequestException(
            self.message,
            last_request=self.last_request,
            last_response=self.last_response,
        )


ResultValue = Union[Dict[str, str], str]


@dataclass(frozen=True)
class GatewayResult:
    """
    Either a successful payload or a GatewayError.

    The payload is the parsed field mapping, or the raw delimited string
    when the caller asked for delimited output. A result is truthy only
    on success, so ``if result:`` tells whether the call went through.
    Whether the vendor accepted the transaction is a separate question
    answered by ``approved``.
    """

    value: ResultValue | None = None
    error: GatewayError | None = None

    @classmethod
    def ok(cls, value: ResultValue) -> "GatewayResult":
        return cls(value=value)

    @classmethod
    def err(cls, error: GatewayError) -> "GatewayResult":
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def is_err(self) -> bool:
        return self.error is not None

    def __bool__(self) -> bool:
        return self.is_ok

    @property
    def is_delimited(self) -> bool:
        return isinstance(self.value, str)

    @property
    def fields(self) -> Mapping[str, str]:
        """The parsed result fields."""
        if self.error is not None:
            raise ValueError(f"Called fields on a failed result: {self.error.message}")
        if isinstance(self.value, str):
            raise ValueError("Called fields on a delimited result; use raw instead")
        return self.value or {}

    @property
    def raw(self) -> str:
        """The delimited response string."""
        if self.error is not None:
            raise ValueError(f"Called raw on a failed result: {self.error.message}")
        if not isinstance(self.value, str):
            raise ValueError("Called raw on a parsed result; use fields instead")
        return self.value

    def get(self, key: str, default: Any = None) -> Any:
        """Field value by name, or ``default`` if absent or not parsed."""
        if self.error is not None or not isinstance(self.value, dict):
            return default
        return self.value.get(key, default)

    def __getitem__(self, key: str) -> str:
        return self.fields[key]

    @property
    def approved(self) -> bool:
        """True when the vendor reported Result 0."""
        return self.get("Result") == "0"

    def unwrap(self) -> ResultValue:
        """Return the payload, raising the matching gateway exception on failure."""
        if self.error is not None:
            raise self.error.to_exception()
        return self.value
