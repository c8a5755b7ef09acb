"""Typed request parameters for the vendor API methods."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class AccountType(str, Enum):
    """Two-character bank account type descriptor."""

    PERSONAL_CHECKING = "PC"
    PERSONAL_SAVINGS = "PS"
    COMMERCIAL_CHECKING = "CC"


def _text(value: object) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@dataclass(frozen=True)
class ResponseFormat:
    """
    How a caller wants the result handed back.

    Attributes:
        delimited: True to get the raw delimited string instead of a mapping
        delim_char: Character separating the response fields, e.g. "," or "|"
    """

    delimited: bool = False
    delim_char: str = ","

    def to_fields(self) -> Dict[str, str]:
        return {
            "x_delim_data": "TRUE" if self.delimited else "",
            "x_delim_char": self.delim_char,
        }


@dataclass(frozen=True)
class TransactionRequest:
    """
    A single ACH credit or debit.

    Values are sent exactly as given; formatting them the way the
    vendor documents is the caller's job.

    Attributes:
        name_first: First name on the account, or the full business name
        name_last: Last name on the account
        routing: 9-digit bank routing number
        account: Bank account number
        account_type: PC, PS or CC
        amount: Amount as ##.## without monetary symbols
        date: Transaction date, MM/DD/YYYY
        name_middle_initial: Middle initial
        email: Receipt address; without one the customer is notified by mail
        phone: 10-digit US phone number as ###-###-####
        dob: Date of birth as MM/DD/YYYY
        last4_ssn: Last four digits of the Social Security Number
        address: Street number and name
        city: City name
        state: 2-character state abbreviation
        zip: ##### or #####-####
        country: 2-character country code
        bank_name: Name of the customer's bank
        bank_city: City of the customer's bank
        bank_state: State of the customer's bank
        bank_phone: Phone of the customer's bank
        product: Memo shown on the transaction in the portal
        descriptor: Line that appears on the bank statement
        currency: Currency descriptor
    """

    name_first: str
    name_last: str
    routing: str
    account: str
    account_type: AccountType | str
    amount: str
    date: str
    name_middle_initial: str = ""
    email: str = ""
    phone: str = ""
    dob: str = ""
    last4_ssn: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""
    country: str = "US"
    bank_name: str = ""
    bank_city: str = ""
    bank_state: str = ""
    bank_phone: str = ""
    product: str = ""
    descriptor: str = ""
    currency: str = "USD"

    def to_fields(self) -> Dict[str, str]:
        """Vendor field names mapped to the values of this request."""
        return {
            "Currency": self.currency,
            "Amount": self.amount,
            "RoutingNumber": self.routing,
            "AccountNumber": self.account,
            "AccountType": _text(self.account_type),
            "TransactionDate": self.date,
            "NameFirst": self.name_first,
            "NameMiddleInitial": self.name_middle_initial,
            "NameLast": self.name_last,
            "EmailAddress": self.email,
            "Phone": self.phone,
            "DateOfBirth": self.dob,
            "Last4SSN": self.last4_ssn,
            "Address": self.address,
            "City": self.city,
            "State": self.state,
            "Zip": self.zip,
            "Country": self.country,
            "BankName": self.bank_name,
            "BankCity": self.bank_city,
            "BankState": self.bank_state,
            "BankPhone": self.bank_phone,
            "Product": self.product,
            "Descriptor": self.descriptor,
        }


@dataclass(frozen=True)
class InboundBatchRequest:
    """
    Several transactions uploaded at once as comma delimited text.

    Attributes:
        description: Label identifying the upload in the portal
        file_text: The comma delimited transaction rows
        has_header: True if the first row is a header the API should skip
    """

    description: str
    file_text: str
    has_header: bool = True

    def to_fields(self) -> Dict[str, str]:
        return {
            "Description": self.description,
            "FileText": self.file_text,
            "HasHeader": "TRUE" if self.has_header else "",
        }
