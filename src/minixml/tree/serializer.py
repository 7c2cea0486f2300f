"""Recursive serializer for element trees.

Every element becomes one or more structural lines: a self-closing line when
it has no children, otherwise an opening line, one line per text child or a
nested block per element child, and a closing line. Attribute values and
text are emitted verbatim.
"""

from typing import Any, List, Optional

from minixml.shared.config import DEFAULT_CONFIG, SerializerConfig
from minixml.tree.attributes import partition_attributes


def format_attributes(attributes: dict) -> str:
    """Render the attribute suffix of a start tag.

    Valued attributes come first, then bare attributes, each group in
    mapping order and each prefixed by a single space when non-empty.
    """
    valued, bare = partition_attributes(attributes)
    suffix = ""
    if valued:
        suffix += " " + " ".join(f'{key}="{value}"' for key, value in valued)
    if bare:
        suffix += " " + " ".join(bare)
    return suffix


def render_lines(
    element: Any, depth: int = 0, config: Optional[SerializerConfig] = None
) -> List[str]:
    """Render ``element`` and its descendants as a list of lines.

    Children exposing ``render_lines`` are rendered as nested blocks one
    level deeper; anything else is converted with ``str()`` and emitted as
    a single indented text line.
    """
    config = config or DEFAULT_CONFIG.serializer
    indent = config.indent(depth)
    start = f"{indent}<{element.name}{format_attributes(element.attributes)}"

    if not element.children:
        return [f"{start} />"]

    child_indent = config.indent(depth + 1)
    lines = [f"{start}>"]
    for child in element.children:
        if hasattr(child, "render_lines"):
            lines.extend(child.render_lines(depth + 1, config))
        else:
            lines.append(f"{child_indent}{child}")
    lines.append(f"{indent}</{element.name}>")
    return lines


def to_string(
    element: Any,
    depth: int = 0,
    include_declaration: bool = False,
    config: Optional[SerializerConfig] = None,
) -> str:
    """Render ``element`` as newline-joined text, optionally with a declaration."""
    config = config or DEFAULT_CONFIG.serializer
    lines = render_lines(element, depth, config)
    if include_declaration:
        lines.insert(0, config.declaration)
    return config.newline.join(lines)
