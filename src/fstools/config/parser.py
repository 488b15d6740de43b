"""
YAML configuration parser for fstools.

This module loads the optional ``.fstools.yaml`` settings file. It handles file
discovery, parsing and validation, and falls back to built-in defaults when no
file is present so the tools behave identically without one.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List, Union
import logging
from dataclasses import dataclass

from pydantic import ValidationError

from ..errors import FSToolsError
from ..models.config import ToolkitConfig


logger = logging.getLogger(__name__)


@dataclass
class ConfigParseResult:
    """
    Result of configuration parsing operation.

    Attributes:
        config: The parsed and validated configuration
        warnings: List of non-fatal warnings
        config_path: Path to the configuration file used
        is_default: Whether default configuration was used
    """
    config: ToolkitConfig
    warnings: List[str]
    config_path: Optional[Path]
    is_default: bool


class ConfigurationError(FSToolsError):
    """Raised when configuration parsing or validation fails."""
    pass


class ConfigParser:
    """
    YAML configuration parser with validation and error handling.

    Searches the working directory, the home directory and the XDG config
    directory for a settings file and converts it to a ToolkitConfig.
    """

    DEFAULT_CONFIG_NAMES = [
        '.fstools.yaml',
        '.fstools.yml'
    ]

    def __init__(self, strict_mode: bool = False):
        """
        Initialize the configuration parser.

        Args:
            strict_mode: If True, treat warnings as errors
        """
        self.strict_mode = strict_mode
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def get_search_paths(self) -> List[Path]:
        """Directories searched for a settings file, in priority order."""
        return [
            Path.cwd(),
            Path.home(),
            Path.home() / '.config' / 'fstools',
        ]

    def load_config(self, config_path: Optional[Union[str, Path]] = None) -> ConfigParseResult:
        """
        Load and parse configuration from file or use defaults.

        Args:
            config_path: Path to configuration file. If None, searches for default files.

        Returns:
            ConfigParseResult containing parsed configuration and metadata

        Raises:
            ConfigurationError: If configuration is invalid or file cannot be read
        """
        if config_path:
            config_path = Path(config_path)
            if not config_path.exists():
                raise ConfigurationError(f"Configuration file not found: {config_path}")
            config_data = self._load_yaml_file(config_path)
            is_default = False
        else:
            config_path, config_data = self._find_and_load_config()
            is_default = config_data is None
            if is_default:
                config_data = {}

        config = self._validate_config_data(config_data)

        warnings = config.validate_configuration()
        if is_default:
            warnings.append("No configuration file found, using default settings")

        if self.strict_mode and warnings:
            raise ConfigurationError(f"Configuration warnings in strict mode: {'; '.join(warnings)}")

        self.logger.debug(f"Configuration loaded from {config_path or 'defaults'}")

        return ConfigParseResult(
            config=config,
            warnings=warnings,
            config_path=config_path,
            is_default=is_default
        )

    def _find_and_load_config(self) -> tuple[Optional[Path], Optional[Dict[str, Any]]]:
        """
        Find and load configuration file from default locations.

        Files that cannot be read or validated are skipped with a warning.

        Returns:
            Tuple of (config_path, config_data) or (None, None) if not found
        """
        for search_path in self.get_search_paths():
            for config_name in self.DEFAULT_CONFIG_NAMES:
                config_file = search_path / config_name
                if config_file.is_file():
                    try:
                        config_data = self._load_yaml_file(config_file)
                        self._validate_config_data(config_data)
                    except ConfigurationError as e:
                        self.logger.warning(f"Failed to load {config_file}: {e}")
                        continue
                    self.logger.info(f"Found configuration file: {config_file}")
                    return config_file, config_data

        self.logger.debug("No configuration file found, using defaults")
        return None, None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load and parse YAML file.

        Args:
            file_path: Path to YAML file

        Returns:
            Parsed YAML data as dictionary

        Raises:
            ConfigurationError: If file cannot be read or parsed
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()

            if not content.strip():
                self.logger.warning(f"Configuration file is empty: {file_path}")
                return {}

            data = yaml.safe_load(content)

            # Comment-only documents parse to None
            if data is None:
                return {}

            if not isinstance(data, dict):
                raise ConfigurationError(f"Configuration file must contain a YAML object, got {type(data).__name__}")

            return data

        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {file_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {e}") from e

    def _validate_config_data(self, config_data: Dict[str, Any]) -> ToolkitConfig:
        """
        Validate configuration data structure and values.

        Args:
            config_data: Raw configuration data from YAML

        Returns:
            Validated configuration

        Raises:
            ConfigurationError: If configuration is invalid
        """
        unknown_keys = sorted(set(config_data) - set(ToolkitConfig.model_fields))
        if unknown_keys:
            raise ConfigurationError(f"Unknown configuration keys: {', '.join(map(str, unknown_keys))}")

        try:
            return ToolkitConfig.from_dict(config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

    def validate_config_file(self, config_path: Union[str, Path]) -> List[str]:
        """
        Validate a configuration file without applying it.

        Args:
            config_path: Path to configuration file

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        config_path = Path(config_path)
        if not config_path.exists():
            errors.append(f"Configuration file not found: {config_path}")
            return errors

        try:
            config_data = self._load_yaml_file(config_path)
            self._validate_config_data(config_data)
        except ConfigurationError as e:
            errors.append(str(e))

        return errors


def load_config(config_path: Optional[Union[str, Path]] = None, strict_mode: bool = False) -> ConfigParseResult:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to configuration file (optional)
        strict_mode: Whether to treat warnings as errors

    Returns:
        ConfigParseResult containing parsed configuration

    Raises:
        ConfigurationError: If configuration is invalid
    """
    parser = ConfigParser(strict_mode=strict_mode)
    return parser.load_config(config_path)


def validate_config_file(config_path: Union[str, Path]) -> List[str]:
    """
    Convenience function to validate a configuration file.

    Args:
        config_path: Path to configuration file

    Returns:
        List of validation errors (empty if valid)
    """
    parser = ConfigParser()
    return parser.validate_config_file(config_path)
