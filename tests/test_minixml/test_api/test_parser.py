"""Tests for the parse_xml_doc and parse_xml_elem entry points."""

import io
from pathlib import Path

import pytest

from minixml.api import LxmlAdapter, parse_xml_doc, parse_xml_elem
from minixml.shared import InvalidArgumentError, ParseError, ParserConfig
from minixml.tree import XMLDocument, XMLElement, escape, xml_doc, xml_elem

DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

pytestmark = pytest.mark.skipif(
    not LxmlAdapter().is_available(), reason="lxml not available"
)


class TestParseXmlElem:
    """Test parsing into plain elements."""

    def test_parse_and_extend(self) -> None:
        """Test parsing a fragment, updating it and adding a child."""
        element = parse_xml_elem("<eg>Node contents</eg>")
        inner = element.update(x=1, y=2).add("inner", "inner contents")

        assert type(element) is XMLElement
        assert element.name == "eg"
        assert element.attributes == {"x": "1", "y": "2"}
        assert element.children == ["Node contents", inner]
        assert inner.children == ["inner contents"]
        assert element.as_character() == "\n".join([
            '<eg x="1" y="2">',
            "  Node contents",
            "  <inner>",
            "    inner contents",
            "  </inner>",
            "</eg>",
        ])

    def test_attribute_order_is_preserved(self) -> None:
        """Test that source attribute order is kept."""
        element = parse_xml_elem('<e z="1" a="2" m="3"/>')

        assert list(element.attributes) == ["z", "a", "m"]
        assert element.as_character() == '<e z="1" a="2" m="3" />'

    def test_mixed_content_order(self) -> None:
        """Test that text and tails become children in document order."""
        element = parse_xml_elem("<p>one<b>two</b>three</p>")

        assert element.children[0] == "one"
        assert element.children[1].name == "b"
        assert element.children[1].children == ["two"]
        assert element.children[2] == "three"

    def test_text_is_reescaped(self) -> None:
        """Test that decoded entities are escaped again for serialization."""
        element = parse_xml_elem("<p>a &amp; b &lt; c</p>")

        assert element.children == ["a &amp; b &lt; c"]
        assert element.as_character() == "<p>\n  a &amp; b &lt; c\n</p>"

    def test_attribute_values_are_decoded(self) -> None:
        """Test that attribute values are stored as decoded text."""
        element = parse_xml_elem('<p q="x &amp; y"/>')

        assert element.attributes["q"] == "x & y"

    def test_decoded_attribute_reescaped_for_output(self) -> None:
        """Test that escaping a decoded attribute restores well-formed output."""
        element = parse_xml_elem('<a t="say &quot;hi&quot;"/>')
        assert element.attributes["t"] == 'say "hi"'

        element.set_attribute("t", escape(element.attributes["t"]))

        assert element.as_character() == '<a t="say &quot;hi&quot;" />'
        assert parse_xml_elem(element.as_character()).attributes["t"] == 'say "hi"'

    def test_comments_and_pis_are_skipped(self) -> None:
        """Test that comments and processing instructions are dropped."""
        element = parse_xml_elem("<r><!-- note --><?pi data?><a/></r>")

        assert [child.name for child in element.children] == ["a"]

    def test_strip_text_can_be_disabled(self) -> None:
        """Test keeping surrounding whitespace in text."""
        element = parse_xml_elem("<p> x </p>", config=ParserConfig(strip_text=False))

        assert element.children == [" x "]

    def test_prefixed_names_are_kept(self) -> None:
        """Test that namespace prefixes stay part of the name."""
        element = parse_xml_elem('<x:a xmlns:x="urn:x"><x:b/></x:a>')

        assert element.name == "x:a"
        assert element.children[0].name == "x:b"


class TestParseXmlDoc:
    """Test parsing into documents."""

    def test_root_is_document_and_descendants_are_elements(self) -> None:
        """Test that only the outermost node becomes a document."""
        document = parse_xml_doc("<root><child><leaf/></child></root>")

        assert isinstance(document, XMLDocument)
        child = document.children[0]
        assert type(child) is XMLElement
        assert type(child.children[0]) is XMLElement

    def test_document_serializes_with_declaration(self) -> None:
        """Test the document declaration default after parsing."""
        document = parse_xml_doc("<root/>")

        assert document.as_character() == f"{DECLARATION}\n<root />"


class TestRoundTrip:
    """Test that serialized trees re-parse to the same text."""

    def test_element_round_trip(self) -> None:
        """Test parse(as_character()) reproduces the same text."""
        root = xml_elem("root", "hello", a="1", b="two words")
        root.add("child", b="2")
        root.add("leaf", "text").add("deeper", "more text", c="3")
        text = root.as_character()

        assert parse_xml_elem(text).as_character() == text

    def test_document_round_trip(self) -> None:
        """Test a document with its declaration."""
        document = xml_doc("config", version="1")
        document.add("entry", "value", key="k")
        text = document.as_character()

        assert parse_xml_doc(text).as_character() == text


class TestInputSources:
    """Test the supported source types."""

    def test_bytes_with_declaration(self) -> None:
        """Test parsing encoded bytes."""
        element = parse_xml_elem(f"{DECLARATION}<r>café</r>".encode("utf-8"))

        assert element.children == ["café"]

    def test_string_with_declaration(self) -> None:
        """Test that str input with an encoding declaration is accepted."""
        element = parse_xml_elem(f"{DECLARATION}\n<r/>")

        assert element.name == "r"

    def test_string_with_byte_order_mark(self) -> None:
        """Test that a leading BOM does not turn XML text into a filename."""
        element = parse_xml_elem("\ufeff<a>x</a>")

        assert element.name == "a"
        assert element.children == ["x"]

    def test_path_and_filename(self, tmp_path: Path) -> None:
        """Test parsing from a Path and from a filename string."""
        target = tmp_path / "in.xml"
        xml_doc("root", "body").save(target)

        assert parse_xml_doc(target).children == ["body"]
        assert parse_xml_elem(str(target)).name == "root"

    def test_file_like_object(self) -> None:
        """Test parsing from a binary stream."""
        element = parse_xml_elem(io.BytesIO(b"<r><a/></r>"))

        assert element.children[0].name == "a"

    def test_unsupported_source_type(self) -> None:
        """Test that unsupported input raises InvalidArgumentError."""
        with pytest.raises(InvalidArgumentError, match="Unsupported XML source type int"):
            parse_xml_elem(42)  # type: ignore[arg-type]

    def test_missing_file_raises_oserror(self, tmp_path: Path) -> None:
        """Test that unreadable files surface as OSError."""
        with pytest.raises(OSError):
            parse_xml_doc(tmp_path / "missing.xml")


class TestHtmlInput:
    """Test parsing HTML through the lenient HTML parser."""

    def test_html_void_elements(self) -> None:
        """Test that unclosed void elements parse in HTML mode."""
        config = ParserConfig(as_html=True)
        element = parse_xml_elem(
            "<html><body><p>Hello<br>world</p></body></html>", config=config
        )

        assert element.name == "html"
        paragraph = element.find_child("body").find_child("p")
        assert paragraph.children[0] == "Hello"
        assert paragraph.children[1].name == "br"
        assert paragraph.children[2] == "world"
        assert paragraph.as_character() == "<p>\n  Hello\n  <br />\n  world\n</p>"

    def test_html_document(self) -> None:
        """Test that HTML input can produce a document root."""
        document = parse_xml_doc(
            b"<html><body><p class=intro>Hi</p></body></html>",
            config=ParserConfig(as_html=True),
        )

        assert isinstance(document, XMLDocument)
        paragraph = document.find_child("body").find_child("p")
        assert paragraph.attributes == {"class": "intro"}

    def test_same_markup_is_rejected_as_xml(self) -> None:
        """Test that the XML parser stays strict by default."""
        with pytest.raises(ParseError):
            parse_xml_elem("<html><body><p>Hello<br>world</p></body></html>")


class TestParseErrors:
    """Test error propagation."""

    def test_malformed_xml_raises_parse_error(self) -> None:
        """Test that syntax errors become ParseError with a position."""
        with pytest.raises(ParseError, match=r"parse_xml_elem\(\)") as excinfo:
            parse_xml_elem("<a>\n<b></a>")

        assert excinfo.value.line is not None
        assert excinfo.value.__cause__ is not None

    def test_unknown_encoding_raises_parse_error(self) -> None:
        """Test that encoding failures become ParseError."""
        with pytest.raises(ParseError):
            parse_xml_doc(b"<a/>", encoding="no-such-encoding")
