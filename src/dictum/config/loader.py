"""Configuration loader for Dictum.

This module provides the ConfigLoader class for loading extraction settings
from YAML files and resolving them against environment variables, CLI flags
and built-in defaults.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError as PydanticValidationError

from dictum.config.defaults import (
    DEFAULT_EXTRACTION_CONFIG,
    PROJECT_CONFIG_NAMES,
    USER_CONFIG_DIR,
)
from dictum.config.validator import flatten_pydantic_errors
from dictum.lib.errors import ConfigError, FileNotFoundError
from dictum.lib.logging_config import get_logger
from dictum.models.config import ExtractionConfig

logger = get_logger(__name__)

# Environment variable to field name mapping
ENV_VAR_MAP = {
    "quote_style": "DICTUM_QUOTE_STYLE",
    "paragraph_split": "DICTUM_PARAGRAPH_SPLIT",
    "output_format": "DICTUM_OUTPUT_FORMAT",
    "verbose": "DICTUM_VERBOSE",
    "quiet": "DICTUM_QUIET",
}


def _parse_env_value(field_name: str, value: str) -> Any:
    """Parse environment variable value to appropriate type.

    Args:
        field_name: Name of the field (used to determine type)
        value: String value from environment variable

    Returns:
        Parsed value (bool for flags, lowercased str otherwise)
    """
    if field_name in ("verbose", "quiet"):
        return value.lower() in ("true", "1", "yes", "on")
    return value.strip().lower()


def _get_env_value(
    field_name: str, env_vars: os._Environ[str] | dict[str, str]
) -> Any | None:
    """Get environment variable value for a field.

    Args:
        field_name: Name of field to get
        env_vars: Environment variables mapping

    Returns:
        Parsed value or None if not set
    """
    env_var_name = ENV_VAR_MAP.get(field_name)
    if not env_var_name or env_var_name not in env_vars:
        return None
    return _parse_env_value(field_name, env_vars[env_var_name])


class ConfigLoader:
    """Loads and validates extraction configuration from YAML files.

    This class handles:
    - Parsing YAML files into Python dictionaries
    - Loading user configuration from ~/.dictum/config.yml|config.yaml
    - Loading project configuration from ./dictum.yml|dictum.yaml
    - Resolving all layers into one ExtractionConfig
    - Converting validation errors into human-readable messages
    """

    def __init__(self) -> None:
        """Initialize the ConfigLoader with empty caches."""
        self._user_config_loaded = False
        self._user_config: ExtractionConfig | None = None

    def parse_yaml(self, file_path: str) -> dict[str, Any]:
        """Parse a YAML file and return its contents as a dictionary.

        Args:
            file_path: Path to the YAML file to parse

        Returns:
            Parsed mapping, empty if the file is empty

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If YAML parsing fails or the top level is not a mapping
        """
        path = Path(file_path)

        try:
            with open(path, encoding="utf-8") as f:
                content = yaml.safe_load(f)
        except OSError as e:
            raise FileNotFoundError(
                file_path,
                f"Configuration file not found at {file_path}. "
                f"Please ensure the file exists at this path.",
            ) from e
        except yaml.YAMLError as e:
            raise ConfigError(
                "yaml_parse",
                f"Failed to parse YAML file {file_path}: {str(e)}",
            ) from e

        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigError(
                "yaml_parse",
                f"Configuration in {file_path} must be a mapping, "
                f"got {type(content).__name__}",
            )
        return content

    def load_config_file(self, file_path: str) -> ExtractionConfig:
        """Load and validate an ExtractionConfig from a YAML file.

        Args:
            file_path: Path to the YAML file

        Returns:
            Validated ExtractionConfig

        Raises:
            FileNotFoundError: If the file does not exist
            ConfigError: If parsing or validation fails
        """
        config_dict = self.parse_yaml(file_path)
        try:
            return ExtractionConfig(**config_dict)
        except PydanticValidationError as e:
            error_text = "\n".join(flatten_pydantic_errors(e))
            raise ConfigError(
                "config_validation",
                f"Invalid configuration in {file_path}:\n{error_text}",
            ) from e

    def load_user_config(self) -> ExtractionConfig | None:
        """Load user configuration from ~/.dictum/config.yml|config.yaml.

        Results are cached after first load.

        Returns:
            ExtractionConfig instance, or None if no config file exists
        """
        if self._user_config_loaded:
            return self._user_config

        config_dir = Path.home() / USER_CONFIG_DIR
        config_path = self._find_config(config_dir, ("config.yml", "config.yaml"))
        result = self.load_config_file(str(config_path)) if config_path else None

        self._user_config = result
        self._user_config_loaded = True
        return result

    def load_project_config(self, project_dir: str) -> ExtractionConfig | None:
        """Load project configuration from dictum.yml|dictum.yaml.

        Args:
            project_dir: Directory to search

        Returns:
            ExtractionConfig instance, or None if no config file exists
        """
        config_path = self._find_config(Path(project_dir), PROJECT_CONFIG_NAMES)
        if config_path is None:
            return None
        return self.load_config_file(str(config_path))

    def _find_config(self, config_dir: Path, names: tuple[str, ...]) -> Path | None:
        """Return the first existing file of ``names`` in ``config_dir``.

        Earlier names win; a notice is logged when a later one also exists.
        """
        found = [config_dir / name for name in names if (config_dir / name).exists()]
        if not found:
            return None
        if len(found) > 1:
            logger.info(
                f"Both {found[0]} and {found[1]} exist. Using {found[0]} "
                f"(prefer .yml extension)."
            )
        return found[0]

    def resolve_extraction_config(
        self,
        cli_config: ExtractionConfig | None,
        file_config: ExtractionConfig | None,
        project_config: ExtractionConfig | None,
        user_config: ExtractionConfig | None,
        defaults: dict[str, Any] | None = None,
    ) -> ExtractionConfig:
        """Resolve extraction configuration with priority hierarchy.

        Configuration priority (highest to lowest):
        1. CLI flags (cli_config)
        2. File passed with --config (file_config)
        3. Project config (./dictum.yml)
        4. User config (~/.dictum/config.yml)
        5. Environment variables (DICTUM_* vars)
        6. Built-in defaults

        Args:
            cli_config: Config from CLI flags (optional)
            file_config: Config from an explicit config file (optional)
            project_config: Config from the project directory (optional)
            user_config: Config from the user's home directory (optional)
            defaults: Default values, DEFAULT_EXTRACTION_CONFIG if omitted

        Returns:
            ExtractionConfig with every field populated

        Raises:
            ConfigError: If an environment variable holds an invalid value
        """
        if defaults is None:
            defaults = DEFAULT_EXTRACTION_CONFIG

        layers = [cli_config, file_config, project_config, user_config]
        resolved: dict[str, Any] = {}

        for field in ExtractionConfig.model_fields:
            for layer in layers:
                if layer is not None and getattr(layer, field) is not None:
                    resolved[field] = getattr(layer, field)
                    break
            else:
                env_value = _get_env_value(field, os.environ)
                resolved[field] = (
                    env_value if env_value is not None else defaults.get(field)
                )

        try:
            return ExtractionConfig(**resolved)
        except PydanticValidationError as e:
            error_text = "\n".join(flatten_pydantic_errors(e))
            raise ConfigError(
                "environment",
                f"Invalid DICTUM_* environment configuration:\n{error_text}",
            ) from e

    def load(
        self,
        config_path: str | None = None,
        cli_config: ExtractionConfig | None = None,
        project_dir: str = ".",
    ) -> ExtractionConfig:
        """Load every configuration layer and resolve them.

        Args:
            config_path: Explicit config file (optional)
            cli_config: Values given on the command line (optional)
            project_dir: Directory searched for project configuration

        Returns:
            Resolved ExtractionConfig
        """
        file_config = self.load_config_file(config_path) if config_path else None
        return self.resolve_extraction_config(
            cli_config=cli_config,
            file_config=file_config,
            project_config=self.load_project_config(project_dir),
            user_config=self.load_user_config(),
        )
