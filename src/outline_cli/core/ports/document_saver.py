"""
Document Saver Port - Abstract interface for persisting documents.

Implementations:
- FileDocumentSaver: Files on the local disk
"""

from abc import ABC, abstractmethod


class DocumentSaverPort(ABC):
    """
    Something that can store a document's text under a name.

    Implementations must never overwrite an existing target: a name that is
    already taken is reported with NameCollisionError.
    """

    @abstractmethod
    def save(self, content: str, name: str) -> None:
        """
        Persist content under the given name.

        Args:
            content: Document text
            name: Target name

        Raises:
            NameCollisionError: If a target with this name already exists
            AdapterError: On any other failure
        """
        ...
