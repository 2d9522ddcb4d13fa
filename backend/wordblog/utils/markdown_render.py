"""Markdown to HTML rendering for stored posts."""

import markdown2

MARKDOWN_EXTRAS = ["fenced-code-blocks", "tables", "strike", "header-ids"]


def render_markdown(text: str) -> str:
    # Pure: the same markdown always renders to the same HTML.
    if not text:
        return ""
    return str(markdown2.markdown(text, extras=MARKDOWN_EXTRAS))
