"""Pure helpers that turn generator output or form input into post fields."""

import re
from typing import Iterable, List, Optional, Union

AI_GENERATED_TAG = "ai-generated"
MANUAL_TAG = "manual"

_HEADING_MARKER_RE = re.compile(r"^#+\s*")


def fallback_title(word: str) -> str:
    return f"Blog about {word}"


def extract_title(text: Optional[str], word: str) -> str:
    """First non-empty line with leading ``#`` markers removed.

    Falls back to ``Blog about {word}`` when the text has no usable line.
    """
    for line in (text or "").splitlines():
        stripped = line.strip()
        if not stripped:
            continue
        title = _HEADING_MARKER_RE.sub("", stripped).strip()
        return title or fallback_title(word)
    return fallback_title(word)


def generated_tags(word: str) -> List[str]:
    return [word.lower(), AI_GENERATED_TAG]


def normalize_manual_tags(tags: Union[str, Iterable[str], None]) -> List[str]:
    """Accept ``"a, b"`` or ``["a", "b"]``; always end with the ``manual`` tag."""
    if tags is None:
        raw: List[str] = []
    elif isinstance(tags, str):
        raw = tags.split(",")
    else:
        raw = [str(tag) for tag in tags if tag is not None]

    normalized = [tag.strip() for tag in raw if tag and tag.strip()]
    if MANUAL_TAG not in normalized:
        normalized.append(MANUAL_TAG)
    return normalized
