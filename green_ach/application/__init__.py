"""Helpers that prepare caller data for the gateway."""

from .batch import BATCH_COLUMNS, build_batch_request, build_batch_text, read_batch_file

__all__ = [
    "BATCH_COLUMNS",
    "build_batch_request",
    "build_batch_text",
    "read_batch_file",
]
