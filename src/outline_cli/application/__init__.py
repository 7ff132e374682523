"""
Application Layer - Use cases composed from ports.

- documents: list documents, retrieve and save one document
"""

from .documents import list_documents, retrieve_and_save_document


__all__ = [
    "list_documents",
    "retrieve_and_save_document",
]
