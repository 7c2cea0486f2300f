"""Parsing entry points for minixml.

XML text is parsed by lxml and converted into ``XMLDocument`` or
``XMLElement`` trees that can be mutated and serialized again.

Examples:
    >>> elem = parse_xml_elem("<eg>Node contents</eg>")
    >>> elem.update(x=1, y=2).add("inner", "inner contents").name
    'inner'
    >>> print(elem)
    <eg x="1" y="2">
      Node contents
      <inner>
        inner contents
      </inner>
    </eg>
"""

import time
from pathlib import Path
from typing import IO, Any, Optional, Union, cast

from minixml.api.adapters import LxmlAdapter
from minixml.shared import (
    DEFAULT_CONFIG,
    InvalidArgumentError,
    ParseError,
    ParserConfig,
    get_logger,
)
from minixml.tree import XMLDocument, XMLElement

# Type definitions for input data
InputType = Union[str, bytes, Path, IO[Any]]

MS_PER_SECOND = 1000


def parse_xml_doc(
    source: InputType,
    encoding: Optional[str] = None,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None,
) -> XMLDocument:
    """Parse XML text or a file into an ``XMLDocument``.

    Set ``ParserConfig(as_html=True)`` to read HTML through lxml's lenient
    HTML parser; the root is then the ``html`` element lxml builds.

    Args:
        source: XML text, bytes, a path, or a file-like object
        encoding: Override the document encoding
        config: Parser settings, defaults to ``DEFAULT_CONFIG.parser``
        correlation_id: Optional correlation ID for request tracking

    Returns:
        Document whose root is named after the source root element

    Raises:
        ParseError: If the input is not well-formed or cannot be decoded
        DependencyMissingError: If lxml is not installed
    """
    return cast(
        XMLDocument,
        _parse(source, True, encoding, config, correlation_id, "parse_xml_doc()"),
    )


def parse_xml_elem(
    source: InputType,
    encoding: Optional[str] = None,
    config: Optional[ParserConfig] = None,
    correlation_id: Optional[str] = None,
) -> XMLElement:
    """Parse XML text or a file into an ``XMLElement``.

    Same as ``parse_xml_doc`` but the root is a plain element, so it
    serializes without the XML declaration by default.

    Text children are re-escaped for ``&``, ``<`` and ``>``, but attribute
    values are stored decoded. A parsed ``t="say &quot;hi&quot;"`` is held
    as ``say "hi"`` and serializes verbatim, which is not well-formed. Store
    such values with ``set_attribute(name, escape(value))`` before writing.
    """
    return _parse(source, False, encoding, config, correlation_id, "parse_xml_elem()")


def _parse(
    source: InputType,
    as_document: bool,
    encoding: Optional[str],
    config: Optional[ParserConfig],
    correlation_id: Optional[str],
    feature: str,
) -> XMLElement:
    start_time = time.time()
    config = config or DEFAULT_CONFIG.parser
    logger = get_logger(__name__, correlation_id, "parse")
    adapter = LxmlAdapter(correlation_id)
    etree = adapter.require(feature)

    logger.debug(
        "Starting parse operation",
        extra={"input_type": type(source).__name__, "as_document": as_document},
    )

    try:
        root = _read_root(etree, source, encoding, config)
    except etree.XMLSyntaxError as e:
        logger.error("Malformed XML input", extra={"feature": feature})
        raise ParseError(
            f"{feature}: {e.msg}", line=e.lineno, column=e.offset
        ) from e
    except (LookupError, UnicodeError) as e:
        logger.error("Unable to decode XML input", extra={"encoding": encoding})
        raise ParseError(f"{feature}: {e}") from e

    if root is None:
        raise ParseError(f"{feature}: document has no root element")

    tree = adapter.from_target(root, as_document=as_document, config=config)

    logger.info(
        "Parse operation completed",
        extra={
            "root": tree.name,
            "processing_time_ms": (time.time() - start_time) * MS_PER_SECOND,
        },
    )
    return tree


def _read_root(etree: Any, source: InputType, encoding: Optional[str],
               config: ParserConfig) -> Any:
    """Hand ``source`` to lxml and return its root element."""
    parser_class = etree.HTMLParser if config.as_html else etree.XMLParser

    if isinstance(source, str):
        text = source.lstrip("\ufeff")
        if text.lstrip().startswith("<"):
            # lxml rejects str input carrying an encoding declaration
            parser = parser_class(encoding="utf-8", **config.backend_options())
            return etree.fromstring(text.encode("utf-8"), parser)

    parser = parser_class(encoding=encoding, **config.backend_options())
    if isinstance(source, bytes):
        return etree.fromstring(source, parser)
    if isinstance(source, (str, Path)):
        return etree.parse(str(source), parser).getroot()
    if hasattr(source, "read"):
        return etree.parse(source, parser).getroot()

    raise InvalidArgumentError(
        f"Unsupported XML source type {type(source).__name__}", source
    )
