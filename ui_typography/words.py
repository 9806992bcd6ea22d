"""Built-in dictionary of words that must not end a wrapped line.

WHY: A short function word ("a", "of", "and") or a lone operator ("+", "&")
left dangling at the right edge of a line reads as a typographic orphan.
Gluing it to the following word with a non-breaking space keeps the pair
together wherever the layout engine wraps.

HOW: NBSP_WORDS is a frozenset of lowercase tokens. The text preparer
lowercases each candidate word and checks membership; nothing else about
the word (punctuation, diacritics) is normalised.

RULES:
- Entries are lowercase and contain no whitespace.
- The set is frozen; callers wanting a different dictionary build their own
  via ui_typography.config.resolve_words() instead of mutating this one.
- Only English is covered; other languages are out of scope.
"""

from typing import FrozenSet

NBSP = "\u00a0"
"""The non-breaking space character (U+00A0)."""

# Articles, prepositions, conjunctions, pronouns and auxiliaries that should
# stay attached to the next word, plus standalone operator/dash tokens.
NBSP_WORDS: FrozenSet[str] = frozenset({
    # articles
    "a", "an", "the",
    # prepositions
    "as", "at", "by", "for", "from", "in", "into", "of", "off", "on",
    "onto", "out", "over", "per", "to", "up", "upon", "via", "with",
    "about", "after", "among", "before", "down", "near", "past", "than",
    "till", "under", "until",
    # conjunctions
    "and", "but", "if", "nor", "or", "so", "yet", "that",
    # pronouns
    "i", "me", "my", "we", "us", "our", "you", "your", "he", "him", "his",
    "she", "her", "it", "its", "they", "them", "who", "whom", "this",
    # auxiliaries and negation
    "am", "is", "are", "be", "was", "no", "not", "do", "can",
    # operators, dashes and signs
    "+", "-", "–", "—", "&", "=", "×", "§", "#", "№", "~",
})
