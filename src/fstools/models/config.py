"""
Configuration data models for fstools.

This module defines the settings shared by every tool: the text encoding used
to read files and how diagnostic logging is emitted.
"""

import codecs
import logging
from typing import Any, Dict, List
from pydantic import BaseModel, Field, field_validator


VALID_LOG_LEVELS = ['CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG']

DEFAULT_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class ToolkitConfig(BaseModel):
    """
    Settings applied to a single fstools invocation.

    Attributes:
        encoding: Codec used to decode text files for cat and grep
        log_level: Minimum level of diagnostic log records written to stderr
        log_format: logging format string for diagnostic records
    """

    encoding: str = Field("utf-8", min_length=1, description="Text encoding for file contents")
    log_level: str = Field("WARNING", description="Diagnostic logging level")
    log_format: str = Field(DEFAULT_LOG_FORMAT, min_length=1, description="Diagnostic logging format")

    @field_validator('encoding')
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        """Ensure the encoding names a codec Python knows about."""
        try:
            return codecs.lookup(v).name
        except LookupError:
            raise ValueError(f"Unknown text encoding: {v}")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = v.strip().upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return level

    def get_log_level(self) -> int:
        """Get the numeric logging level."""
        return logging.getLevelName(self.log_level)

    def validate_configuration(self) -> List[str]:
        """
        Collect non-fatal warnings about this configuration.

        Returns:
            List of warning messages
        """
        warnings = []
        if self.log_level == 'DEBUG':
            warnings.append("Debug logging enabled - diagnostics will be interleaved with tool errors on stderr")
        if '%(message)' not in self.log_format:
            warnings.append("Log format does not include %(message)s - log records will carry no text")
        return warnings

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ToolkitConfig':
        """Create a ToolkitConfig instance from a dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        return f"ToolkitConfig(encoding={self.encoding}, log_level={self.log_level})"
