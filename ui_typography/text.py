"""Non-breaking space insertion for UI copy.

WHY: When a paragraph wraps, a short word such as "a" or "of" can end up
alone at the right edge of a line, detached from the word it belongs to.
Replacing the space after such a word with a non-breaking space keeps the
pair on the same line regardless of container width.

HOW: The text is split into lines on "\\n". Each line is split into words
on whitespace and rebuilt right to left: a dictionary word is glued to
everything after it with NBSP, any other word with a single plain space.
Lines are joined back with "\\n".

RULES:
- Line structure is preserved exactly, including empty lines.
- Whitespace runs inside a line collapse to one space (or one NBSP).
- Dictionary matching lowercases the candidate word only; the output keeps
  the original casing and punctuation.
- A dictionary word at the end of a line still gets a trailing NBSP.
- prepare_string() is pure and total: every str is accepted.
"""

from __future__ import annotations

from typing import AbstractSet, Any, Callable, List, Optional

from ui_typography.words import NBSP, NBSP_WORDS

__all__ = ["NBSP", "prepare_string", "prepared_text"]


def _prepare_line(line: str, words: AbstractSet[str]) -> str:
    """Rebuild one line, walking its words from last to first."""
    result = ""
    for word in reversed(line.split()):
        if word.lower() in words:
            result = word + NBSP + result
        elif result:
            result = word + " " + result
        else:
            result = word
    return result


def prepare_string(text: str, words: Optional[AbstractSet[str]] = None) -> str:
    """Insert non-breaking spaces after dictionary words in every line.

    Args:
        text: Arbitrary, newline-delimited text.
        words: Lowercase dictionary to match against. Defaults to the
               built-in NBSP_WORDS.

    Returns:
        The text with the same lines, where the space following each
        dictionary word is a non-breaking space.
    """
    if words is None:
        words = NBSP_WORDS
    lines: List[str] = text.split("\n")
    return "\n".join(_prepare_line(line, words) for line in lines)


def prepared_text(
    text: str,
    render: Optional[Callable[[str], Any]] = None,
    words: Optional[AbstractSet[str]] = None,
) -> Any:
    """Prepare text and hand it to the host framework's text primitive.

    ``render`` accepts the prepared string and returns whatever node type
    the host uses. Without one, the HTML text-node renderer is used.
    """
    if render is None:
        from ui_typography.markup import render_text
        render = render_text
    return render(prepare_string(text, words))
