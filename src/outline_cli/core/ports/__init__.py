"""
Ports - Abstract interfaces for external dependencies.

Ports define the contracts that adapters must implement.
This enables dependency inversion and easy testing.
"""

from .auth_provider import AuthPort
from .config_provider import AppConfig, ConfigProviderPort, OutlineConfig
from .document_reader import DocumentReaderPort
from .document_saver import DocumentSaverPort


__all__ = [
    "AppConfig",
    "AuthPort",
    "ConfigProviderPort",
    "DocumentReaderPort",
    "DocumentSaverPort",
    "OutlineConfig",
]
