"""Text style attributes derived from Figma text measurements.

WHY: Designers hand over text styles as Figma numbers: font size and line
height in pixels, letter spacing as a percentage of the font size. The UI
styling layer wants absolute values, and it has no line-height attribute,
only spacing between wrapped lines. This module converts one into the
other so call sites never repeat the arithmetic.

HOW: StyleProps holds the Figma measurements. text_style_from_figma()
turns them into a TextStyle: an ordered tuple of opaque Attribute values
plus a separate paragraph-spacing attribute. paragraph_attrs() flattens a
TextStyle for paragraph-level containers.

RULES:
- letter spacing attribute = font_size_px * (letter_spacing_percent / 100)
- paragraph spacing = line_height_px - font_size_px, never clamped
- The region attribute is appended only when a region is given
- Inputs are not validated; nonsensical numbers pass straight through
- Attribute values are opaque here; only host adapters interpret them
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

FONT_FAMILY = "font_family"
FONT_WEIGHT = "font_weight"
FONT_SIZE = "font_size"
LETTER_SPACING = "letter_spacing"
REGION = "region"
SPACING = "spacing"


@dataclass(frozen=True)
class Attribute:
    """One style attribute handed to the host styling layer.

    Attributes:
        kind: Attribute name, one of the module-level kind constants.
        value: The attribute payload (font names, pixels, weight, tag).
    """

    kind: str
    value: Any


@dataclass(frozen=True)
class StyleProps:
    """Text style measurements as exported from Figma.

    RULES:
    - font_family: font names in fallback order, first wins
    - font_weight: passed through untouched (e.g. 400, "bold")
    - font_size_px / line_height_px: pixels; line height is the full
      vertical space of one line, not the gap between lines
    - letter_spacing_percent: percent of font size, may be negative
    - region: optional semantic tag such as "h1"; None omits it
    """

    font_family: Sequence[str]
    font_weight: Any
    font_size_px: int
    line_height_px: int
    letter_spacing_percent: float
    region: Optional[Any] = None


@dataclass(frozen=True)
class TextStyle:
    """Style attributes for a text element plus its paragraph spacing."""

    attrs: Tuple[Attribute, ...]
    paragraph_spacing: Attribute


def text_style_from_figma(props: StyleProps) -> TextStyle:
    """Build a TextStyle from Figma measurements.

    Args:
        props: Font family, weight, size, line height, letter spacing and
               optional region.

    Returns:
        TextStyle whose attrs are family, weight, size, letter spacing and,
        when present, region; paragraph_spacing is the line height minus
        the font size.
    """
    attrs: List[Attribute] = [
        Attribute(FONT_FAMILY, tuple(props.font_family)),
        Attribute(FONT_WEIGHT, props.font_weight),
        Attribute(FONT_SIZE, props.font_size_px),
        Attribute(
            LETTER_SPACING,
            props.font_size_px * (props.letter_spacing_percent / 100),
        ),
    ]
    if props.region is not None:
        attrs.append(Attribute(REGION, props.region))

    return TextStyle(
        attrs=tuple(attrs),
        paragraph_spacing=Attribute(
            SPACING, props.line_height_px - props.font_size_px
        ),
    )


def paragraph_attrs(style: TextStyle) -> List[Attribute]:
    """Attributes for a paragraph container, paragraph spacing first.

    Later attributes override earlier ones in the styling layer, so any
    attribute in ``style.attrs`` takes precedence over the spacing.
    """
    return [style.paragraph_spacing, *style.attrs]


def attribute_to_dict(attr: Attribute) -> Dict[str, Any]:
    """JSON-ready form of an attribute (tuples become lists)."""
    value = list(attr.value) if isinstance(attr.value, tuple) else attr.value
    return {"kind": attr.kind, "value": value}


def style_to_dict(style: TextStyle) -> Dict[str, Any]:
    """JSON-ready form of a TextStyle, as written by the CLI and API."""
    return {
        "attrs": [attribute_to_dict(a) for a in style.attrs],
        "paragraph_spacing": attribute_to_dict(style.paragraph_spacing),
    }
