"""
Core Layer - Domain types, ports and the error hierarchy.

Nothing in here performs I/O; adapters do.
"""

from .domain import (
    DocumentContent,
    DocumentSummary,
    Identity,
    ListOptions,
    ReaderQuery,
    RetrieveOptions,
    SaveTarget,
)
from .ports import AuthPort, DocumentReaderPort, DocumentSaverPort


__all__ = [
    "AuthPort",
    "DocumentContent",
    "DocumentReaderPort",
    "DocumentSaverPort",
    "DocumentSummary",
    "Identity",
    "ListOptions",
    "ReaderQuery",
    "RetrieveOptions",
    "SaveTarget",
]
