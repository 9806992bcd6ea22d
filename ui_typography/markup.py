"""HTML renderer used as the default host text primitive.

WHY: prepared_text() needs some framework to hand its string to. Plain
HTML is the lowest common denominator: the CLI writes it, the HTTP API
returns it, and any templating layer can embed it.

HOW: render_text() escapes the string into a text node. render_paragraph()
prepares the text, picks an element from the style's region and writes
the paragraph attributes as an inline style.

RULES:
- NBSP characters are emitted literally, never as "&nbsp;"
- Known regions ("h1".."h6", sectioning tags) become the element name;
  any other region is kept as a data-region attribute on a <p>
- Text and attribute values are always escaped
"""

from __future__ import annotations

import html
from typing import AbstractSet, Optional

from ui_typography.css import attrs_to_css, to_inline_style
from ui_typography.style import REGION, TextStyle, paragraph_attrs
from ui_typography.text import prepare_string

REGION_ELEMENTS = frozenset({
    "h1", "h2", "h3", "h4", "h5", "h6",
    "header", "nav", "main", "aside", "footer", "section", "article",
})


def render_text(text: str) -> str:
    """Render a string as an escaped HTML text node."""
    return html.escape(text, quote=False)


def _region(style: TextStyle) -> Optional[str]:
    for attr in style.attrs:
        if attr.kind == REGION:
            return str(attr.value)
    return None


def render_paragraph(
    text: str,
    style: TextStyle,
    words: Optional[AbstractSet[str]] = None,
) -> str:
    """Render prepared text as a styled HTML block element."""
    region = _region(style)
    tag = "p"
    extra = ""
    if region is not None:
        if region.lower() in REGION_ELEMENTS:
            tag = region.lower()
        else:
            extra = ' data-region="{}"'.format(html.escape(region))

    css = to_inline_style(attrs_to_css(paragraph_attrs(style)))
    return '<{tag} style="{css}"{extra}>{body}</{tag}>'.format(
        tag=tag,
        css=html.escape(css),
        extra=extra,
        body=render_text(prepare_string(text, words)),
    )
