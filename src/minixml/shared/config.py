"""Configuration classes for minixml.

This module provides immutable configuration objects for the serializer and
the parser adapter, with JSON round-tripping and keyword overrides.
"""

import json
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Optional

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_COMPONENTS = ("serializer", "parser")


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigValidationError(ConfigError, ValueError):
    """Exception raised when configuration validation fails."""

    def __init__(self, message: str, field_name: Optional[str] = None,
                 suggestions: Optional[List[str]] = None):
        super().__init__(message)
        self.field_name = field_name
        self.suggestions = suggestions or []


@dataclass(frozen=True)
class SerializerConfig:
    """Configuration for rendering element trees as indented text."""

    indent_width: int = 2
    indent_char: str = " "
    declaration: str = XML_DECLARATION
    newline: str = "\n"

    def __post_init__(self) -> None:
        """Validate serializer configuration."""
        if not isinstance(self.indent_width, int) or self.indent_width < 0:
            raise ConfigValidationError(
                "indent_width must be an integer >= 0", field_name="indent_width"
            )
        if self.indent_char not in (" ", "\t"):
            raise ConfigValidationError(
                "indent_char must be a single space or tab",
                field_name="indent_char",
            )
        if self.newline not in ("\n", "\r\n"):
            raise ConfigValidationError(
                "newline must be '\\n' or '\\r\\n'", field_name="newline"
            )
        if not self.declaration.startswith("<?xml"):
            raise ConfigValidationError(
                "declaration must start with '<?xml'", field_name="declaration"
            )

    def indent(self, depth: int) -> str:
        """Return the indentation string for ``depth`` nesting levels."""
        return self.indent_char * (self.indent_width * depth)


@dataclass(frozen=True)
class ParserConfig:
    """Configuration for converting backend-parsed XML into element trees.

    ``as_html`` reads the source with lxml's HTML parser instead of the XML
    parser. HTML is always parsed in recovery mode, and ``resolve_entities``
    does not apply to it.
    """

    remove_blank_text: bool = True
    strip_text: bool = True
    resolve_entities: bool = False
    huge_tree: bool = False
    recover: bool = False
    as_html: bool = False

    def backend_options(self) -> Dict[str, Any]:
        """Keyword arguments for ``lxml.etree.XMLParser`` or ``HTMLParser``."""
        options: Dict[str, Any] = {
            "remove_blank_text": self.remove_blank_text,
            "huge_tree": self.huge_tree,
            "recover": self.recover or self.as_html,
            "remove_comments": True,
            "remove_pis": True,
        }
        if not self.as_html:
            options["resolve_entities"] = self.resolve_entities
        return options


@dataclass(frozen=True)
class MinixmlConfig:
    """Top-level configuration bundling all component configurations.

    Thread-safe due to frozen dataclass implementation.
    """

    serializer: SerializerConfig = field(default_factory=SerializerConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)

    def override(self, **kwargs: Any) -> "MinixmlConfig":
        """Create a new configuration with specific overrides.

        Args:
            **kwargs: Overrides in ``component__field`` notation

        Returns:
            New MinixmlConfig instance with overrides applied

        Example:
            >>> config = MinixmlConfig().override(serializer__indent_width=4)
            >>> config.serializer.indent_width
            4
        """
        nested_overrides: Dict[str, Dict[str, Any]] = {}
        for key, value in kwargs.items():
            component, sep, field_name = key.partition("__")
            if not sep or component not in _COMPONENTS:
                raise ConfigValidationError(
                    f"Unknown configuration override '{key}'",
                    field_name=key,
                    suggestions=[f"{name}__<field>" for name in _COMPONENTS],
                )
            nested_overrides.setdefault(component, {})[field_name] = value

        new_fields = {}
        for component, overrides in nested_overrides.items():
            try:
                new_fields[component] = replace(getattr(self, component), **overrides)
            except TypeError as e:
                raise ConfigValidationError(str(e), field_name=component) from e

        return replace(self, **new_fields)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary format."""
        return {
            component: {
                f.name: getattr(getattr(self, component), f.name)
                for f in fields(getattr(self, component))
            }
            for component in _COMPONENTS
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MinixmlConfig":
        """Create configuration from dictionary.

        Args:
            data: Dictionary keyed by component name

        Returns:
            MinixmlConfig instance created from dictionary
        """
        unknown = set(data) - set(_COMPONENTS)
        if unknown:
            raise ConfigValidationError(
                f"Unknown configuration sections: {sorted(unknown)}"
            )
        try:
            return cls(
                serializer=SerializerConfig(**data.get("serializer", {})),
                parser=ParserConfig(**data.get("parser", {})),
            )
        except TypeError as e:
            raise ConfigValidationError(str(e)) from e

    @classmethod
    def from_json(cls, json_str: str) -> "MinixmlConfig":
        """Create configuration from JSON string."""
        try:
            data = json.loads(json_str)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid configuration JSON: {e}") from e
        return cls.from_dict(data)


DEFAULT_CONFIG = MinixmlConfig()
