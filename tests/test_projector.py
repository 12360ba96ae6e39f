"""Tests for lintable projections."""
import logging

from vale_frontmatter.core.frontmatter import FrontMatter, split_lines
from vale_frontmatter.core.projector import (
    Projection,
    build_projection,
    field_text,
    project,
)


def doc(*lines: str) -> str:
    return '\n'.join(lines)


def assert_on_original_line(text: str, projection: Projection, key: str, expected: str):
    """The projected text sits on the same line the key is declared on."""
    original = split_lines(text)
    line_no = next(i for i, line in enumerate(original) if line.startswith(f"{key}:"))
    assert projection.lines[line_no] == expected


# ---------------------------------------------------------------------------
# build_projection
# ---------------------------------------------------------------------------


def test_title_example():
    """A title becomes a heading on its original line, plus a trailing blank line."""
    projection = build_projection(doc("---", "title: Helo world", "---", "Body."))

    assert projection.lines == ["", "# Helo world", "", ""]
    assert projection.text == "\n# Helo world\n\n"


def test_line_count_matches_block():
    """The projection covers the block exactly, plus one trailing line."""
    text = doc(
        "---",
        "layout: post",
        "title: A title",
        "tags:",
        "  - one",
        "  - two",
        "description: Words here",
        "date: 2024-01-01",
        "---",
        "",
        "Body.",
    )

    projection = build_projection(text)

    assert len(projection.lines) == 9 + 1
    assert_on_original_line(text, projection, "title", "# A title")
    assert_on_original_line(text, projection, "description", "Words here")
    assert [i for i, line in enumerate(projection.lines) if line] == [2, 6]


def test_title_and_description_both_substituted():
    text = doc("---", "title: Heading", "description: Prose", "---")

    projection = build_projection(text)

    assert projection.lines == ["", "# Heading", "Prose", "", ""]


def test_description_wins_over_summary():
    """Only description is substituted when both are present."""
    text = doc("---", "summary: Short", "description: Long form", "---")

    projection = build_projection(text)

    assert projection.lines == ["", "", "Long form", "", ""]
    assert "Short" not in projection.text


def test_summary_used_without_description():
    text = doc("---", "title: T", "author: A", "summary: Sumary text", "---")

    projection = build_projection(text)

    assert_on_original_line(text, projection, "summary", "Sumary text")
    assert len(projection.lines) == 6


def test_summary_used_when_description_empty():
    """An empty description does not block the summary."""
    text = doc("---", "description:", "summary: Fallback", "---")

    projection = build_projection(text)

    assert projection.lines == ["", "", "Fallback", "", ""]


def test_no_delimiters():
    assert build_projection(doc("# Just markdown", "", "Body.")) is None


def test_single_delimiter():
    assert build_projection(doc("---", "title: T", "Body.")) is None


def test_empty_frontmatter():
    assert build_projection(doc("---", "---", "Body.")) is None


def test_no_whitelisted_fields():
    """Front matter without prose fields has nothing to lint."""
    assert build_projection(doc("---", "layout: post", "draft: true", "---")) is None


def test_whitelisted_field_not_indexed():
    """A field declared on a line the indexer cannot see is not substituted."""
    text = doc("---", "{title: Flow style}", "---")

    assert build_projection(text) is None


def test_nested_title_left_blank():
    """The top-level title stays on its own line, not on a nested title's line."""
    text = doc("---", "title: Top", "meta:", "  title: Nested", "---")

    projection = build_projection(text)

    assert projection.lines == ["", "# Top", "", "", "", ""]


def test_multiline_value_skipped(caplog):
    """Literal block scalars cannot keep line fidelity and are skipped."""
    text = doc("---", "title: Kept", "description: |", "  line one", "  line two", "---")

    with caplog.at_level(logging.WARNING):
        projection = build_projection(text)

    assert projection.lines == ["", "# Kept", "", "", "", "", ""]
    assert "multi-line 'description'" in caplog.text


def test_folded_value_kept_on_key_line():
    """A folded scalar that reads as one line lands on the key line."""
    text = doc("---", "description: >", "  folded onto", "  one line", "---")

    projection = build_projection(text)

    assert projection.lines[1] == "folded onto one line"
    assert len(projection.lines) == 6


def test_idempotent():
    """Projecting the same text twice gives identical output."""
    text = doc("---", "title: Same", "summary: Again", "---", "Body.")

    assert build_projection(text).text == build_projection(text).text


# ---------------------------------------------------------------------------
# project / field_text
# ---------------------------------------------------------------------------


def test_project_uses_document_line_indices():
    frontmatter = FrontMatter(start_line=0, end_line=4, fields={"title": "T", "summary": "S"})

    projection = project(frontmatter, {"title": 3, "summary": 1})

    assert projection.lines == ["", "S", "", "# T", "", ""]


def test_project_blank_without_matches():
    frontmatter = FrontMatter(start_line=0, end_line=2, fields={"title": "T"})

    projection = project(frontmatter, {})

    assert projection.is_blank()
    assert projection.lines == ["", "", "", ""]


def test_field_text_scalars():
    fields = {"title": 2024, "flag": True, "text": "words\n"}

    assert field_text(fields, "title") == "2024"
    assert field_text(fields, "flag") == "True"
    assert field_text(fields, "text") == "words"


def test_field_text_no_text():
    fields = {"empty": "", "none": None, "items": ["a", "b"], "map": {"a": 1}}

    for key in ("empty", "none", "items", "map", "missing"):
        assert field_text(fields, key) is None
