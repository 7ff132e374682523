"""
Document Reader Port - Abstract interface for reading Outline documents.

Implementations:
- OutlineAdapter: Outline's documents.list and documents.info endpoints
"""

from abc import ABC, abstractmethod

from outline_cli.core.domain.entities import DocumentContent, DocumentSummary
from outline_cli.core.domain.value_objects import ReaderQuery


class DocumentReaderPort(ABC):
    """
    Abstract interface for listing and fetching documents.

    Listing order is defined by the implementation; callers must not
    reorder it.
    """

    @abstractmethod
    def list_documents(self, query: ReaderQuery) -> list[DocumentSummary]:
        """
        List one page of documents.

        Args:
            query: Offset, limit and optional author filter

        Returns:
            Document summaries, possibly empty

        Raises:
            BadCredentialsError: If the credentials were rejected
            AdapterError: On any other failure
        """
        ...

    @abstractmethod
    def retrieve_one(self, document_id: str) -> DocumentContent:
        """
        Fetch the full content of one document.

        Args:
            document_id: ID of the document

        Returns:
            The document with its Markdown text

        Raises:
            BadCredentialsError: If the credentials were rejected
            DocumentNotFoundError: If no document has this ID
            AdapterError: On any other failure
        """
        ...
