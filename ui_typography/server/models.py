"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: Each endpoint has a request and a response model. Attributes are
serialized as {"kind": ..., "value": ...} objects, matching the CLI's
JSON output.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Numeric Figma measurements are type-checked but not range-checked;
  the style mapper passes nonsensical values through unchanged
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class PrepareRequest(BaseModel):
    """Text to run through the non-breaking space pass."""

    text: str = Field(description="Newline-delimited text to prepare.")
    extra_words: Optional[List[str]] = Field(
        default=None,
        description="Tokens added to the server's dictionary for this request only.",
    )


class StyleRequest(BaseModel):
    """Figma text style measurements."""

    font_family: List[str] = Field(
        min_length=1,
        description="Font family names in fallback order.",
    )
    font_weight: Union[int, str] = Field(
        default=400,
        description="Font weight, passed through unchanged (e.g. 600 or 'bold').",
    )
    font_size_px: int = Field(description="Font size in pixels.")
    line_height_px: int = Field(description="Line height in pixels.")
    letter_spacing_percent: float = Field(
        default=0.0,
        description="Letter spacing as a percent of the font size.",
    )
    region: Optional[str] = Field(
        default=None,
        description="Optional semantic region tag, e.g. 'h1'.",
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "font_family": ["Inter", "sans-serif"],
                "font_weight": 600,
                "font_size_px": 16,
                "line_height_px": 24,
                "letter_spacing_percent": -1.5,
                "region": "h2",
            }
        ]
    }}


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class AttributeModel(BaseModel):
    """One opaque style attribute."""

    kind: str = Field(description="Attribute kind, e.g. 'font_size' or 'spacing'.")
    value: Any = Field(description="Attribute payload.")


class PrepareResponse(BaseModel):
    """Prepared text in plain and HTML form."""

    text: str = Field(description="Text with non-breaking spaces inserted.")
    html: str = Field(description="The prepared text as an escaped HTML text node.")


class StyleResponse(BaseModel):
    """Derived text style."""

    attrs: List[AttributeModel] = Field(
        description="Family, weight, size, letter spacing and optional region, in order.",
    )
    paragraph_spacing: AttributeModel = Field(
        description="Line height minus font size, as a spacing attribute.",
    )
    paragraph_attrs: List[AttributeModel] = Field(
        description="Paragraph spacing followed by attrs.",
    )
    css: str = Field(description="Inline CSS for a paragraph with this style.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status.")
    version: str = Field(description="Library version.")


class ErrorResponse(BaseModel):
    """Consistent error body for errors raised by the API itself."""

    detail: str = Field(description="Human-readable error message.")
