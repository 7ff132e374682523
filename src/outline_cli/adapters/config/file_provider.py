"""
File Configuration Provider - Loads configuration from a YAML file.

Searched locations, first match wins:
- An explicit path passed by the caller
- .outline-cli.yaml / .outline-cli.yml in the working directory
- The same names in the home directory

Example:

    outline:
      api_key: ol_api_...
      base_url: https://docs.example.com
      timeout: 10
    output_dir: ~/notes
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from outline_cli.core.exceptions import ConfigError


CONFIG_FILE_NAMES = (".outline-cli.yaml", ".outline-cli.yml")


class FileConfigProvider:
    """
    YAML config file source.

    Read lazily on first lookup; EnvironmentConfigProvider layers the
    other sources on top of it.
    """

    def __init__(self, config_path: Path | None = None, search_dirs: list[Path] | None = None):
        """
        Initialize the provider.

        Args:
            config_path: Explicit config file; must exist if given
            search_dirs: Directories searched when no path is given
        """
        self.explicit_path = config_path
        self.search_dirs = search_dirs if search_dirs is not None else [Path.cwd(), Path.home()]
        self.logger = logging.getLogger("FileConfigProvider")
        self._data: dict[str, Any] | None = None
        self._config_file: Path | None = None

    @property
    def config_file(self) -> Path | None:
        """The file configuration was read from, once loaded."""
        return self._config_file

    def find_config_file(self) -> Path | None:
        """Locate the config file to read, if any."""
        if self.explicit_path is not None:
            return self.explicit_path

        for directory in self.search_dirs:
            for file_name in CONFIG_FILE_NAMES:
                candidate = directory / file_name
                if candidate.is_file():
                    return candidate
        return None

    def read(self) -> dict[str, Any]:
        """
        Read and parse the config file.

        Returns:
            Parsed mapping (empty when no file is found)

        Raises:
            ConfigError: If the file is missing, unreadable or not a mapping
        """
        if self._data is not None:
            return self._data

        path = self.find_config_file()
        if path is None:
            self._data = {}
            return self._data

        try:
            content = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Could not read config file {path}", cause=e) from e

        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in config file {path}", cause=e) from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")

        self.logger.debug(f"Loaded configuration from {path}")
        self._config_file = path
        self._data = data
        return data

    def get(self, key: str, default: Any = None) -> Any:
        value: Any = self.read()
        for part in key.split("."):
            if not isinstance(value, dict) or part not in value:
                return default
            value = value[part]
        return value
