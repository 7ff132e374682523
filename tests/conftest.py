"""
Shared pytest fixtures for the outline-cli test suite.

Fixture Categories:
- Domain: Sample identity and documents
- Ports: Mock implementations of AuthPort, DocumentReaderPort, DocumentSaverPort
- Configuration: OutlineConfig, AppConfig
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from outline_cli.core.domain import DocumentContent, DocumentSummary, Identity
from outline_cli.core.ports import (
    AppConfig,
    AuthPort,
    DocumentReaderPort,
    DocumentSaverPort,
    OutlineConfig,
)


# =============================================================================
# Domain
# =============================================================================


@pytest.fixture
def sample_identity() -> Identity:
    """The user the test credentials belong to."""
    return Identity(id="abc-def-ghi", name="John Doe")


@pytest.fixture
def sample_documents() -> list[DocumentSummary]:
    """Two listed documents, in adapter order."""
    return [
        DocumentSummary(id="abc-def-ghi", title="Shopping list"),
        DocumentSummary(id="ghi-jkl-mno", title="Wish list"),
    ]


@pytest.fixture
def sample_content() -> DocumentContent:
    """A fully retrieved document."""
    return DocumentContent(
        id="abc123",
        title="Shopping list",
        text="# Shopping list\n\n- Milk\n- Eggs\n",
    )


# =============================================================================
# Ports
# =============================================================================


@pytest.fixture
def mock_auth(sample_identity: Identity) -> Mock:
    """AuthPort returning the sample identity."""
    auth = Mock(spec=AuthPort)
    auth.current.return_value = sample_identity
    return auth


@pytest.fixture
def mock_reader(sample_documents: list[DocumentSummary], sample_content: DocumentContent) -> Mock:
    """DocumentReaderPort returning the sample documents and content."""
    reader = Mock(spec=DocumentReaderPort)
    reader.list_documents.return_value = sample_documents
    reader.retrieve_one.return_value = sample_content
    return reader


@pytest.fixture
def mock_saver() -> Mock:
    """DocumentSaverPort that accepts every save."""
    saver = Mock(spec=DocumentSaverPort)
    saver.save.return_value = None
    return saver


# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture
def outline_config() -> OutlineConfig:
    """Outline configuration pointing at a test instance."""
    return OutlineConfig(api_key="test-api-key", base_url="https://outline.test", timeout=5.0)


@pytest.fixture
def app_config(outline_config: OutlineConfig) -> AppConfig:
    """Complete application configuration."""
    return AppConfig(outline=outline_config)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Remove GETOUTLINE_* variables and run in an empty directory."""
    for var in ("API_KEY", "BASE_URL", "TIMEOUT", "OUTPUT_DIR"):
        monkeypatch.delenv(f"GETOUTLINE_{var}", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
