"""
Wire envelope types for the Outline API.

Every Outline response wraps its payload in ``{"data": ...}``; list
endpoints also report the pagination window they served.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PaginationStatus:
    """The pagination window served in response to a list request."""

    offset: int
    limit: int

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PaginationStatus:
        """
        Raises:
            ValueError: If offset or limit is not an integer
        """
        try:
            return cls(offset=int(data.get("offset", 0)), limit=int(data.get("limit", 0)))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Malformed pagination: {data!r}") from e


@dataclass(frozen=True)
class DataEnvelope:
    """The envelope containing the actual data returned from the API."""

    data: Any
    pagination: PaginationStatus | None = None

    @classmethod
    def from_json(cls, payload: Any) -> DataEnvelope:
        """
        Unwrap a decoded JSON response body.

        Raises:
            ValueError: If the body is not an object with a ``data`` field,
                or its pagination is malformed
        """
        if not isinstance(payload, dict) or "data" not in payload:
            raise ValueError("Response body has no 'data' field")

        pagination = payload.get("pagination")
        return cls(
            data=payload["data"],
            pagination=PaginationStatus.from_dict(pagination)
            if isinstance(pagination, dict)
            else None,
        )
