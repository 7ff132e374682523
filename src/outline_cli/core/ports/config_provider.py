"""
Configuration Provider Port - Abstract interface for configuration.

Implementations:
- EnvironmentConfigProvider: YAML config file, .env, environment variables
  and command-line overrides, layered in that order
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


DEFAULT_BASE_URL = "https://app.getoutline.com"
DEFAULT_TIMEOUT = 30.0

API_KEY_VAR = "GETOUTLINE_API_KEY"


@dataclass
class OutlineConfig:
    """Connection settings for the Outline API."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    def is_valid(self) -> bool:
        """Check if configuration is valid."""
        return bool(self.api_key and self.base_url)


@dataclass
class AppConfig:
    """Complete application configuration."""

    outline: OutlineConfig = field(default_factory=lambda: OutlineConfig(api_key=""))

    # Directory documents are saved into (None = working directory)
    output_dir: str | None = None

    def validate(self) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.outline.api_key:
            errors.append(f"Required environment variable missing: {API_KEY_VAR}")
        if not self.outline.base_url:
            errors.append("Missing Outline base URL (GETOUTLINE_BASE_URL)")
        if self.outline.timeout <= 0:
            errors.append(f"Timeout must be positive, got {self.outline.timeout}")

        return errors


class ConfigProviderPort(ABC):
    """
    Abstract interface for configuration providers.

    Configuration can come from various sources:
    - Environment variables
    - .env files
    - YAML config files
    - Command line arguments
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the provider name."""
        ...

    @abstractmethod
    def load(self) -> AppConfig:
        """
        Load configuration from source.

        Returns:
            Complete application configuration
        """
        ...

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a specific configuration value.

        Args:
            key: Configuration key (dot notation supported)
            default: Default value if not found

        Returns:
            Configuration value
        """
        ...

    @abstractmethod
    def validate(self) -> list[str]:
        """
        Validate loaded configuration.

        Returns:
            List of validation errors
        """
        ...
