"""
Environment Configuration Provider - Loads configuration from env vars.

Sources, lowest to highest precedence:
1. YAML config file (see FileConfigProvider)
2. .env file in the working directory
3. Process environment variables
4. CLI overrides

Environment variables:
- GETOUTLINE_API_KEY: API key (required)
- GETOUTLINE_BASE_URL: Outline instance URL
- GETOUTLINE_TIMEOUT: Request timeout in seconds
- GETOUTLINE_OUTPUT_DIR: Directory documents are saved into
"""

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

from outline_cli.core.exceptions import ConfigError
from outline_cli.core.ports.config_provider import (
    AppConfig,
    ConfigProviderPort,
    OutlineConfig,
)

from .file_provider import FileConfigProvider


ENV_PREFIX = "GETOUTLINE_"

# Maps environment variable suffixes to dotted config keys
ENV_KEYS = {
    "API_KEY": "outline.api_key",
    "BASE_URL": "outline.base_url",
    "TIMEOUT": "outline.timeout",
    "OUTPUT_DIR": "output_dir",
}

# Maps argparse destinations to dotted config keys
CLI_KEYS = {
    "api_key": "outline.api_key",
    "base_url": "outline.base_url",
    "output_dir": "output_dir",
}


class EnvironmentConfigProvider(ConfigProviderPort):
    """
    Configuration provider layering env vars over a .env file and a
    YAML config file.
    """

    def __init__(
        self,
        env_file: Path | None = None,
        config_file: Path | None = None,
        cli_overrides: dict[str, Any] | None = None,
        environ: dict[str, str] | None = None,
    ):
        """
        Initialize the provider.

        Args:
            env_file: .env file to read (defaults to ./.env)
            config_file: Explicit YAML config file
            cli_overrides: Parsed CLI arguments; None values are ignored
            environ: Environment to read (defaults to os.environ)
        """
        self.env_file = env_file if env_file is not None else Path.cwd() / ".env"
        self.file_provider = FileConfigProvider(config_path=config_file)
        self.cli_overrides = cli_overrides or {}
        self.environ = environ if environ is not None else os.environ
        self.logger = logging.getLogger("EnvironmentConfigProvider")
        self._values: dict[str, Any] | None = None

    @property
    def name(self) -> str:
        config_file = self.file_provider.config_file
        if config_file:
            return f"Environment + {config_file}"
        return "Environment"

    def _collect(self) -> dict[str, Any]:
        if self._values is not None:
            return self._values

        values: dict[str, Any] = {}

        for key in ENV_KEYS.values():
            file_value = self.file_provider.get(key)
            if file_value is not None:
                values[key] = file_value

        if self.env_file.is_file():
            self.logger.debug(f"Reading {self.env_file}")
            for var_name, value in dotenv_values(self.env_file).items():
                key = self._key_for_var(var_name)
                if key and value is not None:
                    values[key] = value

        for var_name, value in self.environ.items():
            key = self._key_for_var(var_name)
            if key:
                values[key] = value

        for arg_name, key in CLI_KEYS.items():
            value = self.cli_overrides.get(arg_name)
            if value is not None:
                values[key] = value

        self._values = values
        return values

    @staticmethod
    def _key_for_var(var_name: str) -> str | None:
        if not var_name.startswith(ENV_PREFIX):
            return None
        return ENV_KEYS.get(var_name[len(ENV_PREFIX) :])

    def get(self, key: str, default: Any = None) -> Any:
        return self._collect().get(key, default)

    def load(self) -> AppConfig:
        defaults = OutlineConfig(api_key="")
        timeout = self.get("outline.timeout", defaults.timeout)
        try:
            timeout = float(timeout)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid timeout value: {timeout!r}", cause=e) from e

        output_dir = self.get("output_dir")
        return AppConfig(
            outline=OutlineConfig(
                api_key=str(self.get("outline.api_key", "")),
                base_url=str(self.get("outline.base_url", defaults.base_url)),
                timeout=timeout,
            ),
            output_dir=str(output_dir) if output_dir else None,
        )

    def validate(self) -> list[str]:
        errors = []
        explicit = self.file_provider.explicit_path
        if explicit is not None and not explicit.is_file():
            errors.append(f"Config file not found: {explicit}")
            return errors

        try:
            config = self.load()
        except ConfigError as e:
            return [str(e)]

        errors.extend(config.validate())
        return errors
