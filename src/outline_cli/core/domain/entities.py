"""
Domain Entities - Objects returned by the Outline service.

Entities are read-only: they are built by an adapter for one operation
and discarded when the operation returns.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """The user the API credentials belong to."""

    id: str
    name: str

    def __str__(self) -> str:
        return f"{self.name} ({self.id})"


@dataclass(frozen=True)
class DocumentSummary:
    """One row of a document listing."""

    id: str
    title: str


@dataclass(frozen=True)
class DocumentContent:
    """
    A fully retrieved document.

    ``text`` is the document body as Markdown.
    """

    id: str
    title: str
    text: str
