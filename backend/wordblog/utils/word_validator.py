"""Single-word input validation shared by the API and the browser client."""

import re
from enum import Enum
from typing import Optional

from wordblog.errors import InvalidWord

MIN_WORD_LENGTH = 2
MAX_WORD_LENGTH = 20
WORD_PATTERN = r"^[A-Za-z]+$"

_WORD_RE = re.compile(WORD_PATTERN)
_WHITESPACE_RE = re.compile(r"\s")


class WordRejection(str, Enum):
    EMPTY_INPUT = "EmptyInput"
    MULTI_WORD_INPUT = "MultiWordInput"
    NON_LETTER_CHARACTERS = "NonLetterCharacters"
    TOO_SHORT = "TooShort"
    TOO_LONG = "TooLong"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    WordRejection.EMPTY_INPUT: "Word cannot be empty",
    WordRejection.MULTI_WORD_INPUT: "Please enter only ONE word (no spaces allowed)",
    WordRejection.NON_LETTER_CHARACTERS: "Please enter only letters (no numbers or special characters)",
    WordRejection.TOO_SHORT: f"Word must be at least {MIN_WORD_LENGTH} characters long",
    WordRejection.TOO_LONG: f"Word must be at most {MAX_WORD_LENGTH} characters long",
}


def check_word(raw: Optional[str]) -> Optional[WordRejection]:
    """Return the first rule the input breaks, or None when it is a valid word.

    Rules run in a fixed order: empty, whitespace inside, non-letters,
    too short, too long.
    """
    word = (raw or "").strip()
    if not word:
        return WordRejection.EMPTY_INPUT
    if _WHITESPACE_RE.search(word):
        return WordRejection.MULTI_WORD_INPUT
    if not _WORD_RE.match(word):
        return WordRejection.NON_LETTER_CHARACTERS
    if len(word) < MIN_WORD_LENGTH:
        return WordRejection.TOO_SHORT
    if len(word) > MAX_WORD_LENGTH:
        return WordRejection.TOO_LONG
    return None


def validate_word(raw: Optional[str]) -> str:
    """Return the trimmed word with its casing preserved, or raise InvalidWord."""
    rejection = check_word(raw)
    if rejection is not None:
        raise InvalidWord(rejection)
    return raw.strip()


def word_rules() -> dict:
    return {
        "min_length": MIN_WORD_LENGTH,
        "max_length": MAX_WORD_LENGTH,
        "pattern": WORD_PATTERN,
        "messages": {rejection.value: rejection.message for rejection in WordRejection},
    }
