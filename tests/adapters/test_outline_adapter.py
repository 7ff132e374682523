"""Tests for OutlineAdapter."""

from unittest.mock import MagicMock, patch

import pytest

from outline_cli.adapters.outline import OutlineAdapter, OutlineApiClient, OutlineApiError
from outline_cli.application import list_documents
from outline_cli.core.domain import (
    DocumentContent,
    DocumentSummary,
    Identity,
    ListOptions,
    ReaderQuery,
)
from outline_cli.core.exceptions import (
    AdapterError,
    BadCredentialsError,
    DocumentNotFoundError,
    ListingError,
)
from outline_cli.core.ports import AuthPort, DocumentReaderPort


@pytest.fixture
def mock_client() -> MagicMock:
    return MagicMock(spec=OutlineApiClient)


@pytest.fixture
def adapter(outline_config, mock_client) -> OutlineAdapter:
    return OutlineAdapter(outline_config, client=mock_client)


class TestOutlineAdapterInterface:
    """The adapter implements both reading ports."""

    def test_implements_ports(self, adapter):
        assert isinstance(adapter, AuthPort)
        assert isinstance(adapter, DocumentReaderPort)
        assert adapter.name == "Outline"

    def test_builds_client_from_config(self, outline_config):
        adapter = OutlineAdapter(outline_config)
        assert adapter._client.api_url == "https://outline.test/api"
        assert adapter._client.timeout == 5.0

    def test_close_releases_client(self, adapter, mock_client):
        adapter.close()
        mock_client.close.assert_called_once_with()


class TestCurrent:
    """Tests for AuthPort.current."""

    def test_returns_identity(self, adapter, mock_client):
        mock_client.auth_info.return_value = {
            "user": {"id": "abc-def-ghi", "name": "John Doe", "email": "john@example.com"},
            "team": {"id": "t1"},
        }

        assert adapter.current() == Identity(id="abc-def-ghi", name="John Doe")

    def test_any_failure_is_adapter_error(self, adapter, mock_client):
        mock_client.auth_info.side_effect = OutlineApiError("get authentication data", 401)

        with pytest.raises(AdapterError):
            adapter.current()

    def test_malformed_payload_is_adapter_error(self, adapter, mock_client):
        mock_client.auth_info.return_value = {"team": {}}

        with pytest.raises(AdapterError):
            adapter.current()


class TestListDocuments:
    """Tests for DocumentReaderPort.list_documents."""

    def test_passes_query(self, adapter, mock_client):
        mock_client.list_documents.return_value = [
            {"id": "abc-def-ghi", "title": "Shopping list", "text": "ignored"},
            {"id": "ghi-jkl-mno", "title": "Wish list"},
        ]

        result = adapter.list_documents(ReaderQuery(offset=30, limit=15, author_id="u1"))

        mock_client.list_documents.assert_called_once_with(offset=30, limit=15, user="u1")
        assert result == [
            DocumentSummary(id="abc-def-ghi", title="Shopping list"),
            DocumentSummary(id="ghi-jkl-mno", title="Wish list"),
        ]

    def test_unauthorized_is_bad_credentials(self, adapter, mock_client):
        mock_client.list_documents.side_effect = OutlineApiError("list", status_code=401)

        with pytest.raises(BadCredentialsError):
            adapter.list_documents(ReaderQuery(offset=0, limit=15))

    def test_not_found_is_adapter_error_for_listing(self, adapter, mock_client):
        mock_client.list_documents.side_effect = OutlineApiError("list", status_code=404)

        with pytest.raises(AdapterError):
            adapter.list_documents(ReaderQuery(offset=0, limit=15))

    def test_malformed_entry_is_adapter_error(self, adapter, mock_client):
        mock_client.list_documents.return_value = [{"id": "1"}]

        with pytest.raises(AdapterError) as exc_info:
            adapter.list_documents(ReaderQuery(offset=0, limit=15))

        assert isinstance(exc_info.value.cause, OutlineApiError)

    def test_malformed_pagination_is_listing_error(self, outline_config, mock_auth):
        response = MagicMock()
        response.raise_for_status.return_value = None
        response.json.return_value = {
            "data": [{"id": "1", "title": "A"}],
            "pagination": {"offset": None, "limit": 25},
        }

        with patch("outline_cli.adapters.outline.client.requests.Session") as session_cls:
            session_cls.return_value.post.return_value = response
            adapter = OutlineAdapter(outline_config)

            with pytest.raises(ListingError) as exc_info:
                list_documents(ListOptions(), auth=mock_auth, reader=adapter)

        assert isinstance(exc_info.value.cause, AdapterError)


class TestRetrieveOne:
    """Tests for DocumentReaderPort.retrieve_one."""

    def test_returns_content(self, adapter, mock_client):
        mock_client.document_info.return_value = {
            "id": "abc123",
            "title": "Shopping list",
            "text": "- Milk",
            "url": "/doc/shopping-list",
        }

        assert adapter.retrieve_one("abc123") == DocumentContent(
            id="abc123", title="Shopping list", text="- Milk"
        )
        mock_client.document_info.assert_called_once_with("abc123")

    def test_not_found(self, adapter, mock_client):
        mock_client.document_info.side_effect = OutlineApiError("request", status_code=404)

        with pytest.raises(DocumentNotFoundError) as exc_info:
            adapter.retrieve_one("abc123")

        assert exc_info.value.document_id == "abc123"

    def test_unauthorized(self, adapter, mock_client):
        mock_client.document_info.side_effect = OutlineApiError("request", status_code=401)

        with pytest.raises(BadCredentialsError):
            adapter.retrieve_one("abc123")

    @pytest.mark.parametrize("status", [None, 403, 500])
    def test_other_failures(self, adapter, mock_client, status):
        cause = OutlineApiError("request", status_code=status)
        mock_client.document_info.side_effect = cause

        with pytest.raises(AdapterError) as exc_info:
            adapter.retrieve_one("abc123")

        assert exc_info.value.cause is cause
