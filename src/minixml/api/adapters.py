"""Integration adapter between minixml trees and lxml.

The adapter converts lxml element trees into ``XMLElement``/``XMLDocument``
instances and back. lxml is imported lazily so that tree construction and
serialization keep working when it is not installed; only the conversions
require it.
"""

from types import ModuleType
from typing import Any, Optional

from minixml.shared import (
    DEFAULT_CONFIG,
    DependencyMissingError,
    ParserConfig,
    get_logger,
)
from minixml.tree import NA, XMLDocument, XMLElement, escape_text, unescape


class LxmlAdapter:
    """Adapter for bidirectional conversion with lxml.etree."""

    distribution = "lxml"

    def __init__(self, correlation_id: Optional[str] = None) -> None:
        """Initialize adapter.

        Args:
            correlation_id: Optional correlation ID for request tracking
        """
        self.correlation_id = correlation_id
        self.logger = get_logger(__name__, correlation_id, "lxml_adapter")

    def is_available(self) -> bool:
        """Check if lxml is available."""
        try:
            import lxml.etree  # noqa: F401
            return True
        except ImportError:
            return False

    def require(self, feature: str) -> ModuleType:
        """Return the ``lxml.etree`` module.

        Raises:
            DependencyMissingError: If lxml is not installed
        """
        try:
            from lxml import etree
        except ImportError as e:
            raise DependencyMissingError(self.distribution, feature) from e
        return etree

    def from_target(
        self,
        node: Any,
        as_document: bool = False,
        config: Optional[ParserConfig] = None,
    ) -> XMLElement:
        """Convert an lxml element into a minixml tree.

        Only the outermost node becomes an ``XMLDocument`` when
        ``as_document`` is set; all descendants are plain elements. Element
        text and tails become text children in document order; comments and
        processing instructions are skipped.

        Args:
            node: lxml element to convert
            as_document: Produce an ``XMLDocument`` for the root
            config: Parser settings controlling text handling

        Returns:
            The converted tree
        """
        etree = self.require("LxmlAdapter.from_target()")
        config = config or DEFAULT_CONFIG.parser
        return self._convert_element_from_lxml(node, as_document, config, etree)

    def to_target(self, element: XMLElement) -> Any:
        """Convert a minixml tree into an lxml element.

        Tree text is treated as serialized content and unescaped, so lxml
        escapes it exactly once on output. Bare attributes become empty
        attributes, since lxml has no valueless form.
        """
        etree = self.require("LxmlAdapter.to_target()")
        return self._convert_element_to_lxml(element, etree)

    def _convert_element_from_lxml(
        self, node: Any, as_document: bool, config: ParserConfig, etree: ModuleType
    ) -> XMLElement:
        element_class = XMLDocument if as_document else XMLElement
        element = element_class(self._qualified_name(node, etree))
        element.update(**dict(node.attrib))

        children = []
        text = self._clean_text(node.text, config)
        if text is not None:
            children.append(text)

        for child in node:
            if isinstance(child.tag, str):
                children.append(
                    self._convert_element_from_lxml(child, False, config, etree)
                )
            else:
                self.logger.debug(
                    "Skipping non-element node", extra={"node_type": type(child).__name__}
                )
            tail = self._clean_text(child.tail, config)
            if tail is not None:
                children.append(tail)

        element.append(*children)
        return element

    def _convert_element_to_lxml(self, element: XMLElement, etree: ModuleType) -> Any:
        lxml_element = etree.Element(element.name)

        for key, value in element.attributes.items():
            lxml_element.set(key, "" if value is NA else unescape(value))

        last_child = None
        for child in element.children:
            if isinstance(child, XMLElement):
                last_child = self._convert_element_to_lxml(child, etree)
                lxml_element.append(last_child)
                continue

            text = unescape(str(child))
            if last_child is None:
                lxml_element.text = self._join_text(lxml_element.text, text)
            else:
                last_child.tail = self._join_text(last_child.tail, text)

        return lxml_element

    @staticmethod
    def _qualified_name(node: Any, etree: ModuleType) -> str:
        local_name = etree.QName(node).localname
        if node.prefix:
            return f"{node.prefix}:{local_name}"
        return local_name

    @staticmethod
    def _clean_text(text: Optional[str], config: ParserConfig) -> Optional[str]:
        if text is None:
            return None
        if config.strip_text:
            text = text.strip()
        if not text or (config.remove_blank_text and text.isspace()):
            return None
        return escape_text(text)

    @staticmethod
    def _join_text(existing: Optional[str], text: str) -> str:
        if existing:
            return f"{existing} {text}"
        return text
