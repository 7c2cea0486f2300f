"""Shared utilities for minixml.

This module provides configuration objects, the exception taxonomy, and
logging helpers used across the tree and parsing layers.
"""

from .config import (
    DEFAULT_CONFIG,
    XML_DECLARATION,
    ConfigError,
    ConfigValidationError,
    MinixmlConfig,
    ParserConfig,
    SerializerConfig,
)
from .exceptions import (
    DependencyMissingError,
    InvalidArgumentError,
    MinixmlError,
    ParseError,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)

__all__ = [
    "DEFAULT_CONFIG",
    "XML_DECLARATION",
    "ConfigError",
    "ConfigValidationError",
    "MinixmlConfig",
    "ParserConfig",
    "SerializerConfig",
    "DependencyMissingError",
    "InvalidArgumentError",
    "MinixmlError",
    "ParseError",
    "CorrelationLogger",
    "get_logger",
]
