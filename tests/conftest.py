"""Shared test fixtures for the ui_typography test suite.

WHY: Several test modules need the same Figma measurements and the same
custom words file. Centralizing them keeps the expected numbers in one
place.

HOW: Pytest fixtures provide a body text StyleProps (no region), a
heading StyleProps (region "h1"), and a words file written to tmp_path.
The environment is cleared of UI_TYPOGRAPHY_* variables for every test so
a developer's .env never leaks into results.

RULES:
- body_props: Inter/sans-serif, 400, 16px on 24px, 0% letter spacing
- heading_props: "Inter Display"/sans-serif, 700, 32px on 40px, -2%, h1
- words_file contains a comment line, a blank line and mixed-case tokens
"""

import pytest

from ui_typography.style import StyleProps


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Remove dictionary configuration from the environment."""
    monkeypatch.delenv("UI_TYPOGRAPHY_WORDS_FILE", raising=False)
    monkeypatch.delenv("UI_TYPOGRAPHY_EXTRA_WORDS", raising=False)


@pytest.fixture
def body_props():
    """Body copy: 16px on a 24px line, no region."""
    return StyleProps(
        font_family=["Inter", "sans-serif"],
        font_weight=400,
        font_size_px=16,
        line_height_px=24,
        letter_spacing_percent=0.0,
    )


@pytest.fixture
def heading_props():
    """Page heading: 32px on a 40px line, tightened tracking, h1 region."""
    return StyleProps(
        font_family=["Inter Display", "sans-serif"],
        font_weight=700,
        font_size_px=32,
        line_height_px=40,
        letter_spacing_percent=-2.0,
        region="h1",
    )


@pytest.fixture
def words_file(tmp_path):
    """A custom dictionary file: 'Vs.' and 'Dr.' only."""
    path = tmp_path / "words.txt"
    path.write_text("# custom dictionary\n\nVs.\n  Dr.  \n", encoding="utf-8")
    return path
