"""
Configuration management package for fstools.

This package provides configuration parsing, validation, and management
functionality for the fstools command-line utilities.
"""

from .parser import (
    ConfigParser,
    ConfigParseResult,
    ConfigurationError,
    load_config,
    validate_config_file
)

__all__ = [
    'ConfigParser',
    'ConfigParseResult',
    'ConfigurationError',
    'load_config',
    'validate_config_file'
]
