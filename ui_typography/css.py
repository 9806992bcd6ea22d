"""CSS adapter for style attributes.

WHY: The style mapper produces opaque Attribute values. A browser host
needs them as CSS declarations, and the HTML renderer and HTTP API both
want the same translation.

HOW: attrs_to_css() walks the attributes in order and writes one
declaration per kind into a dict, so a later attribute of the same kind
replaces an earlier one. Paragraph spacing has no direct CSS property;
it is expressed as a line height of one em plus the spacing.

RULES:
- Later attributes override earlier ones (paragraph spacing comes first)
- Font names containing anything but letters, digits and hyphens are
  quoted; generic families (serif, sans-serif, ...) are never quoted
- Region and unknown kinds produce no CSS
- Pixel values are written without a trailing ".0"
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterable

from ui_typography.style import (
    FONT_FAMILY,
    FONT_SIZE,
    FONT_WEIGHT,
    LETTER_SPACING,
    SPACING,
    Attribute,
)

GENERIC_FAMILIES = frozenset({
    "serif", "sans-serif", "monospace", "cursive", "fantasy", "system-ui",
    "ui-serif", "ui-sans-serif", "ui-monospace", "ui-rounded",
    "emoji", "math", "fangsong",
})

_BARE_FAMILY = re.compile(r"^[A-Za-z][A-Za-z0-9-]*$")


def _px(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    elif isinstance(value, float):
        value = round(value, 4)
    return "{}px".format(value)


def _family(names: Iterable[str]) -> str:
    parts = []
    for name in names:
        if name.lower() in GENERIC_FAMILIES or _BARE_FAMILY.match(name):
            parts.append(name)
        else:
            parts.append('"{}"'.format(name.replace('"', '\\"')))
    return ", ".join(parts)


def attrs_to_css(attrs: Iterable[Attribute]) -> Dict[str, str]:
    """Translate attributes into CSS declarations, in application order."""
    declarations: Dict[str, str] = {}
    for attr in attrs:
        if attr.kind == FONT_FAMILY:
            declarations["font-family"] = _family(attr.value)
        elif attr.kind == FONT_WEIGHT:
            declarations["font-weight"] = str(attr.value)
        elif attr.kind == FONT_SIZE:
            declarations["font-size"] = _px(attr.value)
        elif attr.kind == LETTER_SPACING:
            declarations["letter-spacing"] = _px(attr.value)
        elif attr.kind == SPACING:
            declarations["line-height"] = "calc(1em + {})".format(_px(attr.value))
    return declarations


def to_inline_style(declarations: Dict[str, str]) -> str:
    """Format declarations for an HTML ``style`` attribute."""
    return "; ".join(
        "{}: {}".format(prop, value) for prop, value in declarations.items()
    )
