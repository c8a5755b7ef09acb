"""
Inbound batch text preparation.

The inboundBatch method takes its transactions as one comma delimited
text blob. Which columns are required depends on the account's
underwriting; BATCH_COLUMNS lists the commonly used ones in the order
the vendor documents them.

Usage:
    text = build_batch_text([
        {"TransactionType": "C", "Amount": "123.45", ...},
        {"TransactionType": "D", "Amount": "234.56", ...},
    ])
    gateway.inbound_batch(InboundBatchRequest("July run", text))
"""

import csv
import io
from pathlib import Path
from typing import Iterable, Mapping, Sequence

import structlog

from green_ach.domain.entities import InboundBatchRequest

logger = structlog.get_logger(__name__)

BATCH_COLUMNS: tuple[str, ...] = (
    "TransactionType",  # C = credit, D = debit
    "Currency",
    "Amount",
    "RoutingNumber",
    "AccountNumber",
    "AccountType",
    "TransactionDate",
    "NameFirst",
    "NameMiddleInitial",
    "NameLast",
    "EmailAddress",
    "Phone",
    "Address",
    "City",
    "State",
    "Zip",
    "Country",
    "Descriptor",
)


def build_batch_text(
    rows: Iterable[Sequence[str] | Mapping[str, str]],
    header: Sequence[str] | None = BATCH_COLUMNS,
) -> str:
    """
    Render transaction rows as comma delimited text.

    Mapping rows are written in ``header`` order, with missing columns
    left empty. Sequence rows are written as given. Pass ``header=None``
    to omit the header line; mapping rows then need a header anyway to
    fix the column order, so it is required for them.

    Raises:
        ValueError: If a mapping row is given without a header
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\r\n")

    if header is not None:
        writer.writerow(header)

    count = 0
    for row in rows:
        if isinstance(row, Mapping):
            if header is None:
                raise ValueError("Mapping rows need a header for column order")
            writer.writerow([row.get(column, "") for column in header])
        else:
            writer.writerow(row)
        count += 1

    logger.debug("batch_text_built", rows=count, has_header=header is not None)
    return buffer.getvalue()


def read_batch_file(path: str | Path, encoding: str = "utf-8") -> str:
    """Load batch text exported from a spreadsheet or another system."""
    return Path(path).read_text(encoding=encoding)


def build_batch_request(
    description: str,
    rows: Iterable[Sequence[str] | Mapping[str, str]],
    header: Sequence[str] | None = BATCH_COLUMNS,
) -> InboundBatchRequest:
    """Build an InboundBatchRequest straight from transaction rows."""
    return InboundBatchRequest(
        description=description,
        file_text=build_batch_text(rows, header),
        has_header=header is not None,
    )
