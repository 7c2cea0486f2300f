"""Element tree model for minixml.

Key Components:
    XMLElement: Mutable named node with ordered attributes and children
    XMLDocument: Root element that emits the XML declaration by default
    NA: Marker for attributes rendered without a value
    escape: Escaper for the five XML-reserved characters
"""

from .attributes import NA, AttributeValue
from .element import XMLDocument, XMLElement, xml_doc, xml_elem
from .escaping import escape, escape_text, unescape
from .serializer import format_attributes, render_lines, to_string

__all__ = [
    "NA",
    "AttributeValue",
    "XMLDocument",
    "XMLElement",
    "xml_doc",
    "xml_elem",
    "escape",
    "escape_text",
    "unescape",
    "format_attributes",
    "render_lines",
    "to_string",
]
