"""Tests for XMLDocument declaration defaults."""

import io
from pathlib import Path

from minixml.tree import XMLDocument, XMLElement, xml_doc

DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


class TestXMLDocument:
    """Test that documents differ from elements only in declaration defaults."""

    def test_document_includes_declaration_by_default(self) -> None:
        """Test the document default for as_character."""
        document = XMLDocument("root")

        assert document.as_character() == f"{DECLARATION}\n<root />"

    def test_document_declaration_can_be_disabled(self) -> None:
        """Test overriding the document default."""
        document = xml_doc("root", "x")

        assert document.as_character(include_declaration=False) == "<root>\n  x\n</root>"

    def test_element_excludes_declaration_by_default(self) -> None:
        """Test the element default for as_character."""
        assert XMLElement("root").as_character() == "<root />"

    def test_nested_document_renders_as_element(self) -> None:
        """Test that the declaration is emitted only by the outermost call."""
        outer = XMLElement("outer")
        outer.append(XMLDocument("inner"))

        assert outer.as_character() == "<outer>\n  <inner />\n</outer>"

    def test_document_inside_document_has_single_declaration(self) -> None:
        """Test nested documents with no root-uniqueness enforcement."""
        outer = XMLDocument("outer", XMLDocument("inner"))

        assert outer.as_character().count("<?xml") == 1

    def test_document_print_and_save_defaults(self, tmp_path: Path) -> None:
        """Test that print and save also default to the declaration."""
        document = XMLDocument("root")
        stream = io.StringIO()
        target = tmp_path / "doc.xml"

        document.print(file=stream)
        document.save(target)

        assert stream.getvalue() == f"{DECLARATION}\n<root />\n"
        assert target.read_text(encoding="utf-8") == f"{DECLARATION}\n<root />\n"

    def test_document_supports_element_api(self) -> None:
        """Test that the mutation API is identical."""
        document = XMLDocument("root", a="1")
        document.add("child").update(b="2")
        document.remove(0).append("text")

        assert document.children == ["text"]
        assert isinstance(document, XMLElement)
