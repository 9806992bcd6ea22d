"""Unit tests for the Figma style mapper.

WHY: text_style_from_figma() owns the unit conversions between Figma and
the styling layer. A wrong letter-spacing formula or paragraph spacing
sign shows up on every screen.

HOW: Tests use the body_props and heading_props fixtures from conftest.py
and check attribute order, derived values, region handling and the
paragraph_attrs() flattening.
"""

import dataclasses

import pytest

from ui_typography.style import (
    FONT_FAMILY,
    FONT_SIZE,
    FONT_WEIGHT,
    LETTER_SPACING,
    REGION,
    SPACING,
    Attribute,
    StyleProps,
    TextStyle,
    paragraph_attrs,
    style_to_dict,
    text_style_from_figma,
)


class TestTextStyleFromFigma:

    def test_body_paragraph_spacing(self, body_props):
        style = text_style_from_figma(body_props)
        assert style.paragraph_spacing == Attribute(SPACING, 8)

    def test_body_letter_spacing_zero(self, body_props):
        style = text_style_from_figma(body_props)
        assert style.attrs[3] == Attribute(LETTER_SPACING, 0)

    def test_attribute_order(self, heading_props):
        style = text_style_from_figma(heading_props)
        assert [a.kind for a in style.attrs] == [
            FONT_FAMILY, FONT_WEIGHT, FONT_SIZE, LETTER_SPACING, REGION,
        ]

    def test_values_passed_through(self, heading_props):
        style = text_style_from_figma(heading_props)
        assert style.attrs[0].value == ("Inter Display", "sans-serif")
        assert style.attrs[1].value == 700
        assert style.attrs[2].value == 32

    def test_letter_spacing_is_percent_of_font_size(self, heading_props):
        style = text_style_from_figma(heading_props)
        assert style.attrs[3].value == pytest.approx(-0.64)

    def test_opaque_weight(self, body_props):
        props = dataclasses.replace(body_props, font_weight="bold")
        assert text_style_from_figma(props).attrs[1] == Attribute(FONT_WEIGHT, "bold")

    def test_negative_paragraph_spacing_not_clamped(self, body_props):
        props = dataclasses.replace(body_props, font_size_px=20, line_height_px=16)
        assert text_style_from_figma(props).paragraph_spacing.value == -4

    def test_malformed_input_passes_through(self):
        props = StyleProps(["Inter"], 400, -10, 0, 50.0)
        style = text_style_from_figma(props)
        assert style.attrs[2].value == -10
        assert style.attrs[3].value == pytest.approx(-5.0)
        assert style.paragraph_spacing.value == 10


class TestRegion:

    def test_region_absent_omits_attribute(self, body_props):
        style = text_style_from_figma(body_props)
        assert len(style.attrs) == 4
        assert all(a.kind != REGION for a in style.attrs)

    def test_region_present_is_last(self, body_props):
        props = dataclasses.replace(body_props, region="h2")
        style = text_style_from_figma(props)
        assert style.attrs[-1] == Attribute(REGION, "h2")

    def test_region_adds_exactly_one(self, body_props):
        without = text_style_from_figma(body_props)
        with_region = text_style_from_figma(dataclasses.replace(body_props, region="x"))
        assert len(with_region.attrs) == len(without.attrs) + 1
        assert with_region.attrs[:-1] == without.attrs


class TestParagraphAttrs:

    def test_spacing_first_then_attrs_in_order(self, heading_props):
        style = text_style_from_figma(heading_props)
        combined = paragraph_attrs(style)
        assert combined[0] == style.paragraph_spacing
        assert combined[1:] == list(style.attrs)

    def test_length(self, body_props):
        style = text_style_from_figma(body_props)
        assert len(paragraph_attrs(style)) == len(style.attrs) + 1


class TestImmutability:

    def test_text_style_is_frozen(self, body_props):
        style = text_style_from_figma(body_props)
        with pytest.raises(dataclasses.FrozenInstanceError):
            style.paragraph_spacing = Attribute(SPACING, 0)

    def test_caller_list_mutation_does_not_leak(self):
        family = ["Inter"]
        style = text_style_from_figma(StyleProps(family, 400, 16, 24, 0.0))
        family.append("Arial")
        assert style.attrs[0].value == ("Inter",)

    def test_attrs_is_tuple(self, body_props):
        assert isinstance(text_style_from_figma(body_props).attrs, tuple)

    def test_letter_spacing_is_required(self):
        with pytest.raises(TypeError):
            StyleProps(["Inter"], 400, 16, 24)


class TestStyleToDict:

    def test_family_becomes_list(self, heading_props):
        data = style_to_dict(text_style_from_figma(heading_props))
        assert data["attrs"][0] == {"kind": "font_family", "value": ["Inter Display", "sans-serif"]}
        assert data["paragraph_spacing"] == {"kind": "spacing", "value": 8}

    def test_body_dict_has_four_attrs(self, body_props):
        style = text_style_from_figma(body_props)
        assert isinstance(style, TextStyle)
        assert len(style_to_dict(style)["attrs"]) == 4
