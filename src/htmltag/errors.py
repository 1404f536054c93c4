"""Errors raised by htmltag."""

from __future__ import annotations

VOID_ELEMENT_CONTENT = "void-element-content"
VOID_ELEMENT_CLOSING_TAG = "void-element-closing-tag"

_MESSAGES = {
    VOID_ELEMENT_CONTENT: "Void elements cannot have any contents.",
    VOID_ELEMENT_CLOSING_TAG: "Void elements do not have a closing tag.",
}


class IllegalContentOperation(Exception):
    """Raised when a content operation is attempted on a void element.

    `code` tells the two cases apart: ``"void-element-content"`` for the content
    mutators, ``"void-element-closing-tag"`` for rendering a closing tag.
    """

    def __init__(self, code: str, tag_name: str | None = None, message: str | None = None) -> None:
        self.code = code
        self.tag_name = tag_name
        self.message = message or _MESSAGES.get(code, code)
        super().__init__(self.message)

    def __repr__(self) -> str:
        if self.tag_name is not None:
            return f"IllegalContentOperation({self.code!r}, tag_name={self.tag_name!r})"
        return f"IllegalContentOperation({self.code!r})"

    def __str__(self) -> str:
        return self.message
