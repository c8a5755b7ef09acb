"""
Unit tests for response parsing.

These tests verify:
1. Positional mapping of delimited responses onto field names
2. Field-count mismatch handling
3. Flattening of SOAP results
"""

import pytest
from suds.sudsobject import Factory

from green_ach.domain.entities import TRANSACTION_RESULT, TRANSACTION_STATUS_RESULT
from green_ach.domain.exceptions import ResponseParseException
from green_ach.infrastructure.clients import flatten_soap_result, parse_delimited


# =============================================================================
# Delimited responses
# =============================================================================

class TestParseDelimited:
    """Tests for parse_delimited."""

    def test_maps_values_to_keys_in_order(self):
        result = parse_delimited(
            "0,Approved,98765",
            ",",
            ["Result", "ResultDescription", "ACHTransaction_ID"],
        )

        assert result == {
            "Result": "0",
            "ResultDescription": "Approved",
            "ACHTransaction_ID": "98765",
        }
        assert list(result) == ["Result", "ResultDescription", "ACHTransaction_ID"]

    def test_custom_delimiter(self):
        result = parse_delimited("1|Invalid routing number|", "|", TRANSACTION_RESULT)

        assert result["Result"] == "1"
        assert result["ResultDescription"] == "Invalid routing number"
        assert result["ACHTransaction_ID"] == ""

    def test_trailing_newline_ignored(self):
        result = parse_delimited("0,Approved,98765\r\n", ",", TRANSACTION_RESULT)

        assert result["ACHTransaction_ID"] == "98765"

    def test_full_status_schema(self):
        values = [
            "0", "Found", "98765", "D", "USD", "123.45", "000000000",
            "12345601", "PC", "07/19/2018", "Testing Smith", "False",
            "True", "07/20/2018 10:00", "False", "",
        ]

        result = parse_delimited(",".join(values), ",", TRANSACTION_STATUS_RESULT)

        assert len(result) == 16
        assert result["Processed"] == "True"
        assert result["ReturnedTime"] == ""

    def test_newline_delimiter_keeps_trailing_empty_field(self):
        result = parse_delimited("1\nInvalid routing number\n", "\n", TRANSACTION_RESULT)

        assert result == {
            "Result": "1",
            "ResultDescription": "Invalid routing number",
            "ACHTransaction_ID": "",
        }

    def test_carriage_return_delimiter_keeps_trailing_empty_field(self):
        result = parse_delimited("1\rDeclined\r", "\r", TRANSACTION_RESULT)

        assert result["ACHTransaction_ID"] == ""

    def test_too_few_fields_raises(self):
        with pytest.raises(ResponseParseException) as exc_info:
            parse_delimited("0,Approved", ",", TRANSACTION_RESULT)

        assert "Expected 3 fields" in exc_info.value.message
        assert exc_info.value.response == "0,Approved"

    def test_extra_fields_dropped(self):
        result = parse_delimited("0,Approved,98765,unexpected", ",", TRANSACTION_RESULT)

        assert result == {
            "Result": "0",
            "ResultDescription": "Approved",
            "ACHTransaction_ID": "98765",
        }

    def test_extra_fields_rejected_when_strict(self):
        with pytest.raises(ResponseParseException):
            parse_delimited(
                "0,Approved,98765,unexpected", ",", TRANSACTION_RESULT, strict=True
            )

    def test_empty_delimiter_raises(self):
        with pytest.raises(ResponseParseException):
            parse_delimited("0,Approved,98765", "", TRANSACTION_RESULT)


# =============================================================================
# SOAP results
# =============================================================================

class TestFlattenSoapResult:
    """Tests for flatten_soap_result."""

    def test_unwraps_method_result_member(self):
        reply = {
            "SingleCreditTransactionResult": {
                "Result": "0",
                "ResultDescription": "Approved",
                "ACHTransaction_ID": "98765",
            }
        }

        assert flatten_soap_result(reply) == {
            "Result": "0",
            "ResultDescription": "Approved",
            "ACHTransaction_ID": "98765",
        }

    def test_flat_reply_kept(self):
        reply = {"Result": "0", "ResultDescription": "Approved"}

        assert flatten_soap_result(reply) == reply

    def test_suds_object(self):
        reply = Factory.object(
            "TransactionResult",
            {"Result": 0, "ResultDescription": "Approved", "ACHTransaction_ID": None},
        )

        assert flatten_soap_result(reply) == {
            "Result": "0",
            "ResultDescription": "Approved",
            "ACHTransaction_ID": "",
        }

    def test_unexpected_type_raises(self):
        with pytest.raises(ResponseParseException):
            flatten_soap_result(["0", "Approved"])
