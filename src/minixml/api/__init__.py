"""Public parsing API for minixml.

This module exposes the parsing entry points and the lxml adapter they are
built on.
"""

from .adapters import LxmlAdapter
from .parser import parse_xml_doc, parse_xml_elem

__all__ = [
    "LxmlAdapter",
    "parse_xml_doc",
    "parse_xml_elem",
]
