"""
Configuration Adapters - Where settings come from.
"""

from .environment import EnvironmentConfigProvider
from .file_provider import FileConfigProvider


__all__ = ["EnvironmentConfigProvider", "FileConfigProvider"]
