"""Title to URL slug conversion and collision suffixing."""

from typing import Iterable

from slugify import slugify

SLUG_MAX_LENGTH = 200
FALLBACK_SLUG = "blog-post"


def base_slug(title: str) -> str:
    """Lowercase, ASCII-only, hyphen-separated slug for a title.

    Titles with no transliterable characters fall back to ``blog-post``.
    """
    slug = slugify(title or "", max_length=SLUG_MAX_LENGTH, word_boundary=True)
    return slug or FALLBACK_SLUG


def unique_slug(base: str, taken: Iterable[str]) -> str:
    """First of ``base``, ``base-1``, ``base-2``, ... that is not in ``taken``."""
    taken = set(taken)
    candidate = base
    counter = 1
    while candidate in taken:
        candidate = f"{base}-{counter}"
        counter += 1
    return candidate
