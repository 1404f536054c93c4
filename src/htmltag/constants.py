"""HTML5 element sets used by htmltag.

Usage:
    from htmltag.constants import VOID_ELEMENTS

References:
    - https://www.w3.org/TR/html51/syntax.html#void-elements
"""

# Elements that cannot have any contents and are rendered without a closing tag.
# keygen and menuitem are obsolete in current HTML but remain part of this set.
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "menuitem",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)
