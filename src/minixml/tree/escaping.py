"""Escaping of XML-reserved characters.

Nothing in the tree escapes automatically: callers escape text exactly once,
at the point it enters the tree. Applying ``escape`` twice double-escapes
ampersands.
"""

# "&" must come first so later substitutions are not re-escaped.
_ENTITIES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ("'", "&apos;"),
    ('"', "&quot;"),
)


def escape(text: str) -> str:
    """Replace the five XML-reserved characters with entity references.

    >>> escape("<a & b>")
    '&lt;a &amp; b&gt;'
    """
    for char, entity in _ENTITIES:
        text = text.replace(char, entity)
    return text


def escape_text(text: str) -> str:
    """Escape only the characters that are reserved in element content."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )


def unescape(text: str) -> str:
    """Reverse ``escape``, resolving the five standard entity references."""
    for char, entity in reversed(_ENTITIES):
        text = text.replace(entity, char)
    return text
