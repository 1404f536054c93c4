from .constants import VOID_ELEMENTS
from .errors import IllegalContentOperation
from .serialize import escape_attr_value, escape_text, serialize_end_tag, serialize_start_tag
from .tag import Tag

__all__ = [
    "VOID_ELEMENTS",
    "IllegalContentOperation",
    "Tag",
    "escape_attr_value",
    "escape_text",
    "serialize_end_tag",
    "serialize_start_tag",
]
