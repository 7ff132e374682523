"""
Outline Adapter - Implements AuthPort and DocumentReaderPort for Outline.

Maps Outline's JSON payloads to domain entities and OutlineApiError to
port errors:

- HTTP 401 -> BadCredentialsError (listing and retrieval)
- HTTP 404 on documents.info -> DocumentNotFoundError
- anything else -> AdapterError
"""

import logging
from typing import Any

from outline_cli.core.domain.entities import DocumentContent, DocumentSummary, Identity
from outline_cli.core.domain.value_objects import ReaderQuery
from outline_cli.core.exceptions import (
    AdapterError,
    BadCredentialsError,
    DocumentNotFoundError,
)
from outline_cli.core.ports.auth_provider import AuthPort
from outline_cli.core.ports.config_provider import OutlineConfig
from outline_cli.core.ports.document_reader import DocumentReaderPort

from .client import OutlineApiClient, OutlineApiError


UNAUTHORIZED = 401
NOT_FOUND = 404


class OutlineAdapter(AuthPort, DocumentReaderPort):
    """
    Outline implementation of AuthPort and DocumentReaderPort.

    One instance serves both ports, sharing a single HTTP session.
    """

    def __init__(self, config: OutlineConfig, client: OutlineApiClient | None = None):
        """
        Initialize the Outline adapter.

        Args:
            config: Outline configuration
            client: Pre-built API client (built from config if omitted)
        """
        self.config = config
        self.logger = logging.getLogger("OutlineAdapter")
        self._client = client or OutlineApiClient(
            token=config.api_key,
            url=config.base_url,
            timeout=config.timeout,
        )

    @property
    def name(self) -> str:
        return "Outline"

    def close(self) -> None:
        """Release the HTTP session."""
        self._client.close()

    # -------------------------------------------------------------------------
    # AuthPort Implementation
    # -------------------------------------------------------------------------

    def current(self) -> Identity:
        try:
            data = self._client.auth_info()
            return self._parse_identity(data)
        except OutlineApiError as e:
            raise AdapterError("Could not read authentication information", cause=e) from e

    # -------------------------------------------------------------------------
    # DocumentReaderPort Implementation
    # -------------------------------------------------------------------------

    def list_documents(self, query: ReaderQuery) -> list[DocumentSummary]:
        try:
            results = self._client.list_documents(
                offset=query.offset,
                limit=query.limit,
                user=query.author_id,
            )
            return [self._parse_summary(item) for item in results]
        except OutlineApiError as e:
            if e.status_code == UNAUTHORIZED:
                raise BadCredentialsError(cause=e) from e
            raise AdapterError("Could not list documents", cause=e) from e

    def retrieve_one(self, document_id: str) -> DocumentContent:
        try:
            data = self._client.document_info(document_id)
            return self._parse_content(data)
        except OutlineApiError as e:
            if e.status_code == UNAUTHORIZED:
                raise BadCredentialsError(cause=e) from e
            if e.status_code == NOT_FOUND:
                raise DocumentNotFoundError(document_id, cause=e) from e
            raise AdapterError(f"Could not retrieve document {document_id}", cause=e) from e

    # -------------------------------------------------------------------------
    # Parsing
    # -------------------------------------------------------------------------

    def _parse_identity(self, data: Any) -> Identity:
        try:
            user = data["user"]
            return Identity(id=str(user["id"]), name=str(user["name"]))
        except (KeyError, TypeError) as e:
            raise OutlineApiError("parse authentication data", cause=e) from e

    def _parse_summary(self, data: Any) -> DocumentSummary:
        try:
            return DocumentSummary(id=str(data["id"]), title=str(data["title"]))
        except (KeyError, TypeError) as e:
            raise OutlineApiError("read list of documents in Outline", cause=e) from e

    def _parse_content(self, data: Any) -> DocumentContent:
        try:
            return DocumentContent(
                id=str(data["id"]),
                title=str(data["title"]),
                text=str(data["text"]),
            )
        except (KeyError, TypeError) as e:
            raise OutlineApiError("parse document content request", cause=e) from e
