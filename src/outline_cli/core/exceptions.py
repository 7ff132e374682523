"""
Exceptions - Error hierarchy shared by ports, adapters and orchestration.

Two layers of errors exist:

- Port errors (PortError) are raised by adapters implementing a port.
  Only AdapterError carries an opaque underlying cause; the others are
  structured and are caught by type.
- Orchestration errors (ListError, RetrieveError) are raised by the
  application layer to its caller. Every port error is reclassified into
  exactly one of them.

Each error keeps the exception it wraps in ``cause`` and renders it as
"message (caused by: ...)", so re-wrapping at every layer boundary keeps the
whole chain readable.
"""

from __future__ import annotations


__all__ = [
    # Base
    "OutlineError",
    # Port errors
    "PortError",
    "AdapterError",
    "BadCredentialsError",
    "DocumentNotFoundError",
    "NameCollisionError",
    # Listing
    "ListError",
    "InvalidCredentialsError",
    "AuthLookupError",
    "ListingError",
    # Retrieval
    "RetrieveError",
    "BadAuthError",
    "DocumentDoesNotExistError",
    "RetrieveFailedError",
    "SaveNameCollisionError",
    "SaveFailedError",
    # Configuration
    "ConfigError",
]


class OutlineError(Exception):
    """Base exception for all outline-cli errors."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message} (caused by: {self.cause})"
        return self.message


# =============================================================================
# Port Errors
# =============================================================================


class PortError(OutlineError):
    """Base exception raised by adapters implementing a port."""


class AdapterError(PortError):
    """Any adapter failure that has no more specific meaning."""


class BadCredentialsError(PortError):
    """The remote service rejected the credentials."""

    def __init__(self, message: str = "Reader credentials did not work", cause: Exception | None = None):
        super().__init__(message, cause)


class DocumentNotFoundError(PortError):
    """The requested document does not exist."""

    def __init__(
        self,
        document_id: str,
        message: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message or f"Document not found: {document_id}", cause)
        self.document_id = document_id


class NameCollisionError(PortError):
    """A save target with the same name already exists."""

    def __init__(self, name: str, cause: Exception | None = None):
        super().__init__(f"A target named {name!r} already exists", cause)
        self.name = name


# =============================================================================
# Listing Errors
# =============================================================================


class ListError(OutlineError):
    """Base exception for the document listing operation."""


class InvalidCredentialsError(ListError):
    """Credentials were rejected while listing documents."""

    def __init__(self, message: str = "Outline credentials were invalid", cause: Exception | None = None):
        super().__init__(message, cause)


class AuthLookupError(ListError):
    """Information about the current user could not be read."""


class ListingError(ListError):
    """The list of documents could not be fetched."""


# =============================================================================
# Retrieval Errors
# =============================================================================


class RetrieveError(OutlineError):
    """Base exception for the retrieve-and-save operation."""


class BadAuthError(RetrieveError):
    """Credentials were rejected while retrieving a document."""

    def __init__(self, message: str = "The API token was rejected", cause: Exception | None = None):
        super().__init__(message, cause)


class DocumentDoesNotExistError(RetrieveError):
    """No document exists with the requested ID."""

    def __init__(self, document_id: str, cause: Exception | None = None):
        super().__init__(f"Document does not exist: {document_id}", cause)
        self.document_id = document_id


class RetrieveFailedError(RetrieveError):
    """The document could not be fetched for another reason."""


class SaveNameCollisionError(RetrieveError):
    """The document could not be saved because the name is taken."""

    def __init__(self, name: str, cause: Exception | None = None):
        super().__init__(f"A file with the same name already exists: {name}", cause)
        self.name = name


class SaveFailedError(RetrieveError):
    """The document was fetched but could not be saved."""


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(OutlineError):
    """Configuration could not be loaded."""
