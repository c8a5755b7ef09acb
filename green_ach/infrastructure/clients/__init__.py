"""ACH service client implementations."""

from .ach_gateway import ACHGateway
from .parsing import flatten_soap_result, parse_delimited

__all__ = [
    "ACHGateway",
    "flatten_soap_result",
    "parse_delimited",
]
