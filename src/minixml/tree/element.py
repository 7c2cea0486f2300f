"""Element and document model for minixml.

``XMLElement`` is a mutable node with a tag name, an ordered attribute
mapping and an ordered list of children, each either text or another
element. ``XMLDocument`` is the same node with the XML declaration emitted
by default.

Example:
    >>> root = XMLElement("thing")
    >>> _ = root.add("node").update(style="color: blue;").add("mytag", "Some text.")
    >>> print(root)
    <thing>
      <node style="color: blue;">
        <mytag>
          Some text.
        </mytag>
      </node>
    </thing>
"""

import sys
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, TextIO, Union

from minixml.shared import DEFAULT_CONFIG, InvalidArgumentError, SerializerConfig, get_logger
from minixml.tree import serializer
from minixml.tree.attributes import AttributeValue, apply_attribute
from minixml.tree.escaping import escape

Child = Union[str, "XMLElement", Any]


def _validate_name(name: Any, caller: str) -> None:
    if not isinstance(name, str) or not name:
        raise InvalidArgumentError(
            f"{caller}: 'name' must be a non-empty string, got {name!r}", name
        )


class XMLElement:
    """A named XML node with ordered attributes and ordered children.

    Keyword arguments become attributes and positional arguments become
    children, through the same logic as ``update``. Element children are
    held by reference: appending one element to two parents shares it
    between both trees. Use ``copy`` to get an independent subtree.
    """

    include_declaration_default = False

    def __init__(self, name: str, /, *children: Child, **attributes: Any) -> None:
        _validate_name(name, f"{type(self).__name__}()")
        self._name = name
        self.attributes: Dict[str, AttributeValue] = {}
        self.children: List[Child] = []
        self.update(*children, **attributes)

    @property
    def name(self) -> str:
        """Tag name, fixed at construction."""
        return self._name

    @property
    def elements(self) -> List["XMLElement"]:
        """Direct children that are elements, in order."""
        return [child for child in self.children if isinstance(child, XMLElement)]

    def __len__(self) -> int:
        return len(self.children)

    def __bool__(self) -> bool:
        # An element is truthy even without children
        return True

    def __iter__(self) -> Iterator[Child]:
        return iter(self.children)

    def __str__(self) -> str:
        return self.as_character()

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} {self._name!r} "
            f"attributes={len(self.attributes)} children={len(self.children)}>"
        )

    def __deepcopy__(self, memo: Dict[int, Any]) -> "XMLElement":
        return self.copy()

    # Mutation

    def update(self, /, *children: Child, **attributes: Any) -> "XMLElement":
        """Update attributes and append children.

        Named arguments overwrite attributes of the same name. ``None``
        deletes an attribute and ``NA`` makes it a bare attribute with no
        value; any other value is stored as ``str(value)``. Positional
        arguments are appended to the children in order.

        Returns:
            This element, for chaining
        """
        for key, value in attributes.items():
            apply_attribute(self.attributes, key, value)
        if children:
            self.append(*children)
        return self

    def set_attribute(self, name: str, value: Any) -> "XMLElement":
        """Set one attribute, for names that are not Python identifiers."""
        _validate_name(name, "XMLElement.set_attribute()")
        apply_attribute(self.attributes, name, value)
        return self

    def get_attribute(
        self, name: str, default: Optional[AttributeValue] = None
    ) -> Optional[AttributeValue]:
        """Get attribute value with optional default."""
        return self.attributes.get(name, default)

    def has_attribute(self, name: str) -> bool:
        """Check if element has specific attribute."""
        return name in self.attributes

    def append(self, *children: Child, position: Optional[int] = None) -> "XMLElement":
        """Insert children as one contiguous block.

        Args:
            *children: Text or elements to add
            position: Number of existing children the block is placed
                after. ``None`` appends to the end, ``0`` prepends, and a
                value past the end appends.

        Returns:
            This element, for chaining
        """
        if position is None:
            self.children.extend(children)
            return self

        if isinstance(position, bool) or not isinstance(position, int) or position < 0:
            raise InvalidArgumentError(
                f"XMLElement.append(): 'position' must be an integer >= 0, "
                f"got {position!r}",
                position,
            )
        self.children[position:position] = children
        return self

    def append_escaped(self, *texts: Any, position: Optional[int] = None) -> "XMLElement":
        """Escape each text with ``escape`` and append it as a child."""
        return self.append(*(escape(str(text)) for text in texts), position=position)

    def add(self, name: str, /, *children: Child, **attributes: Any) -> "XMLElement":
        """Create a child element, append it, and return the new child.

        Unlike the other mutators this returns the child, so that
        ``parent.add("a").add("b")`` builds a chain of nested elements.
        """
        _validate_name(name, "XMLElement.add()")
        child = XMLElement(name, *children, **attributes)
        self.children.append(child)
        return child

    def remove(self, *indices: int) -> "XMLElement":
        """Remove the children at the given 0-based indices.

        Negative indices count from the end. All indices are checked before
        anything is removed, so a bad index leaves the children untouched.

        Raises:
            IndexError: If any index is out of range

        Returns:
            This element, for chaining
        """
        count = len(self.children)
        positions = set()
        for index in indices:
            if isinstance(index, bool) or not isinstance(index, int):
                raise InvalidArgumentError(
                    f"XMLElement.remove(): indices must be integers, got {index!r}",
                    index,
                )
            if not -count <= index < count:
                raise IndexError(
                    f"Child index {index} out of range for <{self._name}> "
                    f"with {count} children"
                )
            positions.add(index % count)

        for index in sorted(positions, reverse=True):
            del self.children[index]
        return self

    def copy(self) -> "XMLElement":
        """Return a deep copy that shares no mutable state with this element."""
        clone = type(self).__new__(type(self))
        clone._name = self._name
        clone.attributes = dict(self.attributes)
        clone.children = [
            child.copy() if isinstance(child, XMLElement) else child
            for child in self.children
        ]
        return clone

    # Lookup

    def find_child(self, name: str) -> Optional["XMLElement"]:
        """Find first direct child element with matching name."""
        for child in self.elements:
            if child.name == name:
                return child
        return None

    def find_children(self, name: str) -> List["XMLElement"]:
        """Find all direct child elements with matching name."""
        return [child for child in self.elements if child.name == name]

    def text_content(self) -> str:
        """Concatenate all text in this subtree, space separated."""
        parts = []
        for child in self.children:
            if isinstance(child, XMLElement):
                text = child.text_content()
            else:
                text = str(child)
            if text:
                parts.append(text)
        return " ".join(parts)

    # Serialization

    def render_lines(
        self, depth: int = 0, config: Optional[SerializerConfig] = None
    ) -> List[str]:
        """Render this subtree as structural lines starting at ``depth``."""
        return serializer.render_lines(self, depth, config)

    def as_character(
        self,
        depth: int = 0,
        include_declaration: Optional[bool] = None,
        config: Optional[SerializerConfig] = None,
    ) -> str:
        """Convert this element and its children to indented XML text.

        Args:
            depth: Nesting level of this element
            include_declaration: Prepend the XML declaration. ``None`` uses
                the type default (off for elements, on for documents).
            config: Serializer settings, defaults to ``DEFAULT_CONFIG``

        Returns:
            Newline-joined XML text without a trailing newline
        """
        if include_declaration is None:
            include_declaration = self.include_declaration_default
        return serializer.to_string(self, depth, include_declaration, config)

    def print(
        self,
        include_declaration: Optional[bool] = None,
        file: Optional[TextIO] = None,
        config: Optional[SerializerConfig] = None,
    ) -> "XMLElement":
        """Write the XML text to ``file`` (standard output by default)."""
        print(
            self.as_character(include_declaration=include_declaration, config=config),
            file=file if file is not None else sys.stdout,
        )
        return self

    def save(
        self,
        filename: Union[str, Path],
        include_declaration: Optional[bool] = None,
        encoding: str = "utf-8",
        config: Optional[SerializerConfig] = None,
    ) -> "XMLElement":
        """Write the XML text to ``filename``, one structural line per line.

        Raises:
            OSError: If the file cannot be written
        """
        logger = get_logger(__name__, component="save")
        config = config or DEFAULT_CONFIG.serializer
        path = Path(filename)
        text = self.as_character(include_declaration=include_declaration, config=config)

        try:
            with path.open("w", encoding=encoding, newline="") as handle:
                handle.write(text + config.newline)
        except OSError:
            logger.error("Failed to save XML", extra={"path": str(path)})
            raise

        logger.info(
            "Saved XML",
            extra={"path": str(path), "element": self._name, "characters": len(text)},
        )
        return self


class XMLDocument(XMLElement):
    """An element used as a tree root.

    Behaves exactly like ``XMLElement`` except that ``as_character``,
    ``print`` and ``save`` include the XML declaration by default. A
    document nested inside another tree renders like any element, since
    the declaration is only emitted by the outermost call.
    """

    include_declaration_default = True


def xml_elem(name: str, /, *children: Child, **attributes: Any) -> XMLElement:
    """Create an ``XMLElement``."""
    return XMLElement(name, *children, **attributes)


def xml_doc(name: str, /, *children: Child, **attributes: Any) -> XMLDocument:
    """Create an ``XMLDocument``."""
    return XMLDocument(name, *children, **attributes)
