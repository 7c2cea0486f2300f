"""minixml.

A small library for building XML documents programmatically: create a tree
of elements with ordered attributes and children, mutate it, and serialize
it to indented XML text. Existing XML can be parsed into the same model.

Quick start:
    >>> from minixml import xml_elem
    >>> root = xml_elem("thing")
    >>> _ = root.add("node", style="color: blue;").add("mytag", "Some text.")
    >>> _ = root.save("thing.xml")
"""

__version__ = "0.1.0"
__author__ = "minixml developers"

from .api import LxmlAdapter, parse_xml_doc, parse_xml_elem
from .shared import (
    DEFAULT_CONFIG,
    ConfigError,
    ConfigValidationError,
    DependencyMissingError,
    InvalidArgumentError,
    MinixmlConfig,
    MinixmlError,
    ParseError,
    ParserConfig,
    SerializerConfig,
)
from .tree import NA, XMLDocument, XMLElement, escape, xml_doc, xml_elem

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Tree construction
    "NA",
    "XMLDocument",
    "XMLElement",
    "escape",
    "xml_doc",
    "xml_elem",

    # Parsing
    "LxmlAdapter",
    "parse_xml_doc",
    "parse_xml_elem",

    # Configuration
    "DEFAULT_CONFIG",
    "MinixmlConfig",
    "ParserConfig",
    "SerializerConfig",

    # Errors
    "ConfigError",
    "ConfigValidationError",
    "DependencyMissingError",
    "InvalidArgumentError",
    "MinixmlError",
    "ParseError",
]
