"""
Value Objects - Immutable query and naming types.

These carry the caller's intent into the application layer and the
port-level queries derived from it.
"""

from __future__ import annotations

from dataclasses import dataclass


MARKDOWN_SUFFIX = ".md"

DEFAULT_RESULTS_PER_PAGE = 15


@dataclass(frozen=True)
class ListOptions:
    """
    Options for listing a page of documents.

    Attributes:
        page: Zero-based page number.
        results_per_page: Number of documents per page.
        own_documents_only: Only list documents written by the current user.
    """

    page: int = 0
    results_per_page: int = DEFAULT_RESULTS_PER_PAGE
    own_documents_only: bool = False

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValueError(f"page must not be negative, got {self.page}")
        if self.results_per_page < 0:
            raise ValueError(
                f"results_per_page must not be negative, got {self.results_per_page}"
            )


@dataclass(frozen=True)
class ReaderQuery:
    """
    Offset-based query handed to a DocumentReaderPort.

    Attributes:
        offset: Number of documents to skip from the start of the listing.
        limit: Maximum number of documents to return.
        author_id: Only return documents written by this user, if set.
    """

    offset: int
    limit: int
    author_id: str | None = None

    @classmethod
    def from_list_options(cls, options: ListOptions, author_id: str | None = None) -> ReaderQuery:
        """Translate a page request into an offset/limit query."""
        return cls(
            offset=options.page * options.results_per_page,
            limit=options.results_per_page,
            author_id=author_id,
        )


@dataclass(frozen=True)
class RetrieveOptions:
    """Options for retrieving and saving a single document."""

    suggested_name: str | None = None


@dataclass(frozen=True)
class SaveTarget:
    """The name a retrieved document is saved under."""

    name: str

    @classmethod
    def derive(cls, title: str, suggested_name: str | None = None) -> SaveTarget:
        """
        Derive the save name for a document.

        The suggested name wins over the document title. ``.md`` is appended
        unless the name already ends with it in any letter case; nothing
        else about the name is changed.

        Args:
            title: The document's own title.
            suggested_name: Name requested by the caller, if any.

        Returns:
            The derived SaveTarget.
        """
        name = suggested_name if suggested_name is not None else title
        if not name.lower().endswith(MARKDOWN_SUFFIX):
            name = f"{name}{MARKDOWN_SUFFIX}"
        return cls(name=name)

    def __str__(self) -> str:
        return self.name
