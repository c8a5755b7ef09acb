"""
Unit tests for GatewayResult.

These tests verify:
1. Success and failure construction
2. Truthiness follows transport/parse success, not vendor approval
3. Accessors for parsed and delimited payloads
4. unwrap raises the matching gateway exception
"""

import pytest

from green_ach import ErrorKind, GatewayError, GatewayResult
from green_ach.domain.exceptions import (
    GatewayTransportException,
    ResponseParseException,
    SoapRequestException,
)


class TestGatewayResultOk:
    """Tests for successful results."""

    def test_parsed_result(self):
        result = GatewayResult.ok({"Result": "0", "ACHTransaction_ID": "98765"})

        assert result.is_ok
        assert not result.is_err
        assert bool(result) is True
        assert result["ACHTransaction_ID"] == "98765"
        assert result.get("Missing", "x") == "x"
        assert result.approved

    def test_declined_result_is_still_truthy(self):
        result = GatewayResult.ok({"Result": "1", "ResultDescription": "Declined"})

        assert result
        assert not result.approved

    def test_delimited_result(self):
        result = GatewayResult.ok("0,Approved,98765")

        assert result.is_delimited
        assert result.raw == "0,Approved,98765"
        assert result.get("Result") is None
        with pytest.raises(ValueError, match="delimited result"):
            _ = result.fields

    def test_raw_on_parsed_result_raises(self):
        result = GatewayResult.ok({"Result": "0"})

        with pytest.raises(ValueError, match="parsed result"):
            _ = result.raw

    def test_unwrap_returns_value(self):
        assert GatewayResult.ok("0,Approved,1").unwrap() == "0,Approved,1"


class TestGatewayResultErr:
    """Tests for failed results."""

    def test_failed_result_is_falsy(self):
        result = GatewayResult.err(GatewayError(ErrorKind.TRANSPORT, "down"))

        assert result.is_err
        assert not result
        assert result.error.message == "down"
        assert not result.approved
        assert result.get("Result") is None

    def test_fields_on_failure_raises(self):
        result = GatewayResult.err(GatewayError(ErrorKind.PARSE, "bad"))

        with pytest.raises(ValueError, match="failed result"):
            _ = result.fields

    @pytest.mark.parametrize(
        "kind, exception_type",
        [
            (ErrorKind.TRANSPORT, GatewayTransportException),
            (ErrorKind.PARSE, ResponseParseException),
            (ErrorKind.SOAP, SoapRequestException),
        ],
    )
    def test_unwrap_raises_matching_exception(self, kind, exception_type):
        result = GatewayResult.err(GatewayError(kind, "failed"))

        with pytest.raises(exception_type, match="failed"):
            result.unwrap()

    def test_soap_exception_keeps_envelopes(self):
        error = GatewayError(
            ErrorKind.SOAP,
            "fault",
            last_request="<req/>",
            last_response="<resp/>",
        )

        exc = error.to_exception()

        assert exc.last_request == "<req/>"
        assert exc.last_response == "<resp/>"
        assert exc.code == "SOAP_REQUEST_ERROR"
