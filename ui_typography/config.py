"""Configuration: environment variables, .env loading and dictionary files.

WHY: The built-in dictionary covers common English function words, but a
product may want to add its own tokens ("vs.", brand prefixes) or swap in
a hand-maintained list. Keeping that in configuration means the CLI and
HTTP server pick it up without code changes, while the library functions
stay pure and default to the built-in set.

HOW: python-dotenv loads the .env file on import. resolve_words() reads
UI_TYPOGRAPHY_WORDS_FILE and UI_TYPOGRAPHY_EXTRA_WORDS at call time (so
tests can monkeypatch the environment), loads the file with load_words()
and normalises everything with normalize_words().

RULES:
- Words files: one token per line, strip whitespace, ignore blank lines
  and lines starting with '#', UTF-8
- A words file replaces the built-in dictionary; extra words are added
- Tokens are lowercased; a resolved dictionary may never be empty
- Explicit arguments win over environment variables
- All defaults can be overridden via environment variables
- UI_TYPOGRAPHY_LOG_LEVEL must name a logging level; resolve_log_level()
  raises ValueError otherwise
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import FrozenSet, Iterable, Optional

from dotenv import load_dotenv

from ui_typography.words import NBSP_WORDS

logger = logging.getLogger(__name__)

# Load .env from the project root (where the script is run from)
load_dotenv()

WORDS_FILE_ENV = "UI_TYPOGRAPHY_WORDS_FILE"
EXTRA_WORDS_ENV = "UI_TYPOGRAPHY_EXTRA_WORDS"

LOG_LEVEL = os.getenv("UI_TYPOGRAPHY_LOG_LEVEL", "WARNING").upper()
API_HOST = os.getenv("UI_TYPOGRAPHY_HOST", "127.0.0.1")
API_PORT = int(os.getenv("UI_TYPOGRAPHY_PORT", "8000"))


def resolve_log_level(name: str) -> int:
    """Map a level name such as "INFO" to its logging constant.

    Raises:
        ValueError: If the name is not a known logging level.
    """
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(
            "Unknown log level '{}' in UI_TYPOGRAPHY_LOG_LEVEL. "
            "Use DEBUG, INFO, WARNING, ERROR or CRITICAL.".format(name)
        )
    return level


def load_words(path: str | Path) -> list[str]:
    """Load dictionary tokens from a text file.

    RULES:
    - One token per line
    - Strip leading/trailing whitespace from each line
    - Ignore blank lines and lines starting with '#'
    - Raises FileNotFoundError if the file doesn't exist

    Args:
        path: Path to the words file.

    Returns:
        List of tokens, in file order, with original casing.
    """
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    tokens: list[str] = []
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        tokens.append(stripped)
    return tokens


def normalize_words(tokens: Iterable[str]) -> FrozenSet[str]:
    """Lowercase and strip tokens, dropping empty ones."""
    return frozenset(t.strip().lower() for t in tokens if t.strip())


def _split_extra(raw: str) -> list[str]:
    return [part for part in raw.split(",") if part.strip()]


def resolve_words(
    words_file: Optional[str | Path] = None,
    extra_words: Optional[Iterable[str]] = None,
) -> FrozenSet[str]:
    """Build the dictionary the CLI and server should use.

    WHY: One place decides whether the built-in list, a words file, or
    either of those plus extra tokens is in effect.

    HOW: Arguments take priority; otherwise UI_TYPOGRAPHY_WORDS_FILE and
    UI_TYPOGRAPHY_EXTRA_WORDS (comma-separated) are consulted.

    Returns:
        NBSP_WORDS itself when nothing is configured, otherwise a new
        frozenset.

    Raises:
        FileNotFoundError: If the configured words file does not exist.
        ValueError: If the resulting dictionary would be empty.
    """
    if words_file is None:
        words_file = os.getenv(WORDS_FILE_ENV) or None
    if extra_words is None:
        extra_words = _split_extra(os.getenv(EXTRA_WORDS_ENV, ""))
    extra = normalize_words(extra_words)

    if words_file is None and not extra:
        logger.debug("Using built-in dictionary (%d words)", len(NBSP_WORDS))
        return NBSP_WORDS

    if words_file is not None:
        path = Path(words_file)
        if not path.is_file():
            raise FileNotFoundError("Words file not found: {}".format(path))
        base = normalize_words(load_words(path))
        logger.debug("Loaded %d words from %s", len(base), path)
    else:
        base = NBSP_WORDS

    words = base | extra
    if not words:
        raise ValueError(
            "Dictionary is empty. Check {} and {}.".format(
                WORDS_FILE_ENV, EXTRA_WORDS_ENV
            )
        )
    logger.debug("Dictionary resolved to %d words (%d extra)", len(words), len(extra))
    return words
