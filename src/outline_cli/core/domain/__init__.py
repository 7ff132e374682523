"""
Domain Layer - Entities and value objects.
"""

from .entities import DocumentContent, DocumentSummary, Identity
from .value_objects import (
    DEFAULT_RESULTS_PER_PAGE,
    MARKDOWN_SUFFIX,
    ListOptions,
    ReaderQuery,
    RetrieveOptions,
    SaveTarget,
)


__all__ = [
    "DEFAULT_RESULTS_PER_PAGE",
    "MARKDOWN_SUFFIX",
    "DocumentContent",
    "DocumentSummary",
    "Identity",
    "ListOptions",
    "ReaderQuery",
    "RetrieveOptions",
    "SaveTarget",
]
