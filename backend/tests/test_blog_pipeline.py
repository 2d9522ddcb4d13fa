"""Title and tag extraction for generated and manual posts."""

from wordblog.services.blog_pipeline import (
    extract_title,
    generated_tags,
    normalize_manual_tags,
)
from wordblog.services.blog_service import draft_from_generation
from tests.conftest import FREEDOM_ARTICLE


def test_title_is_first_heading_without_markers():
    assert extract_title(FREEDOM_ARTICLE, "freedom") == "Why Freedom Still Surprises Us"


def test_title_skips_blank_lines_and_plain_first_line_is_kept():
    assert extract_title("\n\n   \nJust a Line\n# Later", "word") == "Just a Line"


def test_title_strips_any_heading_depth():
    assert extract_title("### Deep Title ###", "word") == "Deep Title ###"


def test_title_falls_back_when_empty():
    assert extract_title("", "Freedom") == "Blog about Freedom"
    assert extract_title(None, "Freedom") == "Blog about Freedom"
    assert extract_title("#\nbody", "Freedom") == "Blog about Freedom"


def test_generated_tags_lowercase_word_and_provenance():
    assert generated_tags("Freedom") == ["freedom", "ai-generated"]


def test_manual_tags_from_comma_string():
    assert normalize_manual_tags(" travel, food ,, ") == ["travel", "food", "manual"]


def test_manual_tags_from_list():
    assert normalize_manual_tags(["travel", " ", "food"]) == ["travel", "food", "manual"]


def test_manual_tags_missing_or_already_tagged():
    assert normalize_manual_tags(None) == ["manual"]
    assert normalize_manual_tags(["manual", "x"]) == ["manual", "x"]


def test_draft_from_generation_scenario():
    draft = draft_from_generation("freedom", FREEDOM_ARTICLE)
    assert draft.title == "Why Freedom Still Surprises Us"
    assert draft.tags == ["freedom", "ai-generated"]
    assert draft.content == FREEDOM_ARTICLE
