"""The Tag builder: one HTML5 element, rendered on demand."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .constants import VOID_ELEMENTS
from .errors import VOID_ELEMENT_CLOSING_TAG, VOID_ELEMENT_CONTENT, IllegalContentOperation
from .serialize import escape_text, serialize_end_tag, serialize_start_tag

logger = logging.getLogger(__name__)


class Tag:
    """An HTML5 element: a name, ordered attributes and pre-rendered content.

    Tag names and attribute names are converted to lowercase. Content is kept as
    flattened markup, so an appended child is rendered at the moment it is
    appended and later changes to it are not seen by the parent.

    Void elements (``img``, ``br``, ...) accept attributes but never content:
    every content operation on them raises IllegalContentOperation.
    """

    __slots__ = ("_attributes", "_content", "_is_void", "_name")

    def __init__(self, name: str, attributes: Mapping[str, Any] | None = None) -> None:
        name = name.lower()
        self._name = name
        self._is_void = name in VOID_ELEMENTS
        self._attributes: dict[str, str] = {}
        self._content = ""
        if attributes:
            self.set_attributes(attributes)

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_void(self) -> bool:
        return self._is_void

    def get_name(self) -> str:
        return self._name

    # Attributes

    def get_attributes(self) -> dict[str, str]:
        """Return a copy of the attributes, in insertion order."""
        return dict(self._attributes)

    def has_attribute(self, name: str) -> bool:
        return name.lower() in self._attributes

    def get_attribute(self, name: str) -> str | None:
        """Return the attribute value, or None if there is no such attribute."""
        return self._attributes.get(name.lower())

    def set_attribute(self, name: str, value: Any) -> Tag:
        # Overwriting an existing key keeps its original position.
        self._attributes[name.lower()] = str(value)
        return self

    def set_attributes(self, attributes: Mapping[str, Any]) -> Tag:
        for name, value in attributes.items():
            self._attributes[name.lower()] = str(value)
        return self

    def remove_attribute(self, name: str) -> Tag:
        self._attributes.pop(name.lower(), None)
        return self

    # Content

    def _check_can_have_content(self) -> None:
        if self._is_void:
            logger.debug("Rejected content operation on void element <%s>", self._name)
            raise IllegalContentOperation(VOID_ELEMENT_CONTENT, self._name)

    def empty(self) -> Tag:
        self._check_can_have_content()
        self._content = ""
        return self

    def set_text_content(self, text: str) -> Tag:
        """Replace the content with `text`, escaped as an HTML text node."""
        self._check_can_have_content()
        self._content = escape_text(text)
        return self

    def set_html_content(self, html: str) -> Tag:
        """Replace the content with `html`, inserted verbatim.

        The markup is trusted and is not checked in any way.
        """
        self._check_can_have_content()
        self._content = html
        return self

    def append_text_content(self, text: str) -> Tag:
        self._check_can_have_content()
        self._content += escape_text(text)
        return self

    def append_html_content(self, html: str) -> Tag:
        self._check_can_have_content()
        self._content += html
        return self

    def append(self, tag: Tag) -> Tag:
        """Append the rendered markup of another tag to the content."""
        self._check_can_have_content()
        if not isinstance(tag, Tag):
            msg = f"Cannot append {type(tag).__name__} to a Tag, expected a Tag"
            raise TypeError(msg)
        self._content += tag.render()
        return self

    def is_empty(self) -> bool:
        return self._content == ""

    # Rendering

    def render_opening_tag(self) -> str:
        return serialize_start_tag(self._name, self._attributes)

    def render_closing_tag(self) -> str:
        if self._is_void:
            logger.debug("Rejected closing tag for void element <%s>", self._name)
            raise IllegalContentOperation(VOID_ELEMENT_CLOSING_TAG, self._name)
        return serialize_end_tag(self._name)

    def render(self) -> str:
        if self._is_void:
            return self.render_opening_tag()
        return self.render_opening_tag() + self._content + self.render_closing_tag()

    def __html__(self) -> str:
        return self.render()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        if self._attributes:
            return f"Tag({self._name!r}, {self._attributes!r})"
        return f"Tag({self._name!r})"
