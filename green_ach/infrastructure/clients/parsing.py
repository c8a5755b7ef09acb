"""Turn vendor responses into named result fields."""

from typing import Any, Dict, Mapping, Sequence

import structlog
from suds.sudsobject import Object as SudsObject
from suds.sudsobject import asdict

from green_ach.domain.exceptions import ResponseParseException

logger = structlog.get_logger(__name__)


def parse_delimited(
    response: str,
    delim_char: str,
    keys: Sequence[str],
    strict: bool = False,
) -> Dict[str, str]:
    """
    Split a delimited response and name its values positionally.

    A response with fewer values than ``keys`` cannot be mapped and is
    rejected. Extra trailing values are dropped with a warning, or
    rejected as well when ``strict`` is set.

    Args:
        response: Body returned by the API
        delim_char: Character the API was asked to delimit with
        keys: Field names documented for the called method, in order

    Returns:
        Mapping of field name to value, in ``keys`` order

    Raises:
        ResponseParseException: If the response does not fit ``keys``
    """
    if not delim_char:
        raise ResponseParseException("Delimiter must not be empty", response)

    # A line terminator is only noise when it is not the delimiter itself
    if delim_char not in ("\r", "\n", "\r\n"):
        response = response.rstrip("\r\n")

    values = response.split(delim_char)

    if len(values) < len(keys):
        raise ResponseParseException(
            f"Expected {len(keys)} fields but response has {len(values)}",
            response,
        )

    if len(values) > len(keys):
        if strict:
            raise ResponseParseException(
                f"Expected {len(keys)} fields but response has {len(values)}",
                response,
            )
        logger.warning(
            "ach_response_extra_fields",
            expected=len(keys),
            received=len(values),
        )

    return dict(zip(keys, values))


def _as_mapping(obj: Any) -> Dict[str, Any]:
    if isinstance(obj, SudsObject):
        return asdict(obj)
    if isinstance(obj, Mapping):
        return dict(obj)
    raise ResponseParseException(
        f"Unexpected SOAP result type: {type(obj).__name__}"
    )


def flatten_soap_result(result: Any) -> Dict[str, str]:
    """
    Unwrap a SOAP result into a flat field mapping.

    The service nests the fields inside a single ``<Method>Result``
    member; that wrapper is removed when present. Values are returned
    as strings with missing values as "".
    """
    fields = _as_mapping(result)

    if len(fields) == 1:
        (inner,) = fields.values()
        if isinstance(inner, (SudsObject, Mapping)):
            fields = _as_mapping(inner)

    return {
        str(key): "" if value is None else str(value)
        for key, value in fields.items()
    }
