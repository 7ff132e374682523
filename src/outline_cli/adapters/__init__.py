"""
Adapters - Concrete implementations of ports.

- outline: Outline REST API (AuthPort, DocumentReaderPort)
- storage: Local files (DocumentSaverPort)
- config: Environment, .env and YAML configuration (ConfigProviderPort)
"""

from .config import EnvironmentConfigProvider, FileConfigProvider
from .outline import OutlineAdapter, OutlineApiClient
from .storage import FileDocumentSaver


__all__ = [
    "EnvironmentConfigProvider",
    "FileConfigProvider",
    "FileDocumentSaver",
    "OutlineAdapter",
    "OutlineApiClient",
]
