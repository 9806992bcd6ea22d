"""UI typography helpers: orphan-free text and Figma text styles.

WHY: UI copy wraps at arbitrary widths, and short words left at the end of
a line look broken. Text styles come from Figma in units the styling layer
cannot use directly. Both fixes are small, pure transformations that every
screen needs, so they live in one library.

HOW: Two independent leaves. text.prepare_string() glues dictionary words
to the following word with a non-breaking space. style.text_style_from_figma()
converts Figma measurements into style attributes. The CSS/HTML adapters,
CLI and HTTP API are thin layers on top.

RULES:
- The core functions are pure; they never log, read config or raise
- The built-in dictionary is immutable; configure alternatives instead
- Attribute values are opaque to the core
"""

from ui_typography.style import (
    Attribute,
    StyleProps,
    TextStyle,
    paragraph_attrs,
    text_style_from_figma,
)
from ui_typography.text import NBSP, prepare_string, prepared_text
from ui_typography.words import NBSP_WORDS

__version__ = "0.1.0"

__all__ = [
    "NBSP",
    "NBSP_WORDS",
    "Attribute",
    "StyleProps",
    "TextStyle",
    "paragraph_attrs",
    "prepare_string",
    "prepared_text",
    "text_style_from_figma",
]
