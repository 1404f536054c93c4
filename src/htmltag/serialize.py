"""Escaping and tag serialization helpers for htmltag."""

from __future__ import annotations

from collections.abc import Mapping


def escape_text(text: str | None) -> str:
    """Escape text for use as an HTML text node.

    Only ``&``, ``<`` and ``>`` are replaced; quotes are left as they are.
    """
    if not text:
        return ""
    return str(text).replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def escape_attr_value(value: str | None) -> str:
    """Escape a value for use inside a double-quoted attribute.

    Single quotes are escaped too, so the value stays safe if it is ever moved
    into a single-quoted context.
    """
    if not value:
        return ""
    value = str(value)
    value = value.replace("&", "&amp;")
    value = value.replace("<", "&lt;").replace(">", "&gt;")
    return value.replace('"', "&quot;").replace("'", "&#039;")


def serialize_start_tag(name: str, attrs: Mapping[str, str] | None = None) -> str:
    parts: list[str] = ["<", name]
    if attrs:
        for key, value in attrs.items():
            parts.extend([" ", key, '="', escape_attr_value(value), '"'])
    # Void elements get no trailing solidus.
    parts.append(">")
    return "".join(parts)


def serialize_end_tag(name: str) -> str:
    return f"</{name}>"
