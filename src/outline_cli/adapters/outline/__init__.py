"""
Outline Adapter - Integration with the Outline documentation service.

This module provides the OutlineAdapter and the low-level API client it
is built on.
"""

from outline_cli.adapters.outline.adapter import OutlineAdapter
from outline_cli.adapters.outline.client import OutlineApiClient, OutlineApiError
from outline_cli.adapters.outline.envelope import DataEnvelope, PaginationStatus


__all__ = [
    "DataEnvelope",
    "OutlineAdapter",
    "OutlineApiClient",
    "OutlineApiError",
    "PaginationStatus",
]
