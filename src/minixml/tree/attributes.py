"""Attribute values and the sentinels that control them.

An attribute value is either a string (rendered as ``name="value"``) or the
``NA`` marker (rendered as a bare ``name``). A missing key means the
attribute does not exist; passing ``None`` to ``update`` deletes it.
"""

from typing import Any, Dict, List, Tuple, Union


class _NAType:
    """Singleton marker for an attribute that has a name but no value."""

    _instance = None

    def __new__(cls) -> "_NAType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NA"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> "_NAType":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "_NAType":
        return self

    def __reduce__(self) -> str:
        return "NA"


NA = _NAType()

AttributeValue = Union[str, _NAType]


def apply_attribute(attributes: Dict[str, AttributeValue], key: str, value: Any) -> None:
    """Apply a single named ``update`` entry to an attribute mapping.

    ``None`` deletes the key (no-op when absent), ``NA`` stores the bare
    marker, anything else is stored in its string form. Overwriting keeps
    the key's original position in the mapping.
    """
    if value is None:
        attributes.pop(key, None)
    elif value is NA:
        attributes[key] = NA
    else:
        attributes[key] = str(value)


def partition_attributes(
    attributes: Dict[str, AttributeValue]
) -> Tuple[List[Tuple[str, str]], List[str]]:
    """Split attributes into valued pairs and bare names, each in map order."""
    valued = []
    bare = []
    for key, value in attributes.items():
        if value is NA:
            bare.append(key)
        else:
            valued.append((key, value))
    return valued, bare
