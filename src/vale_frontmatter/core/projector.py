"""Build lintable projections of front matter.

A projection blanks every line of the front matter block except the lines
declaring prose fields, which are replaced by the field text. Because the
line count never changes, diagnostics reported against the projection point
at the same lines in the original document.
"""
from dataclasses import dataclass
import logging

from .frontmatter import FrontMatter, index_key_lines, locate_frontmatter, split_lines

logger = logging.getLogger(__name__)

HEADING_MARKER = "#"

# Fields eligible for substitution, in priority order for the body slot
TITLE_FIELD = "title"
BODY_FIELDS = ("description", "summary")


@dataclass
class Projection:
    """Lintable text replacing a document's front matter."""
    lines: list[str]

    @property
    def text(self) -> str:
        return '\n'.join(self.lines)

    def is_blank(self) -> bool:
        return self.text.strip() == ''


def field_text(fields: dict, key: str) -> str | None:
    """
    Get the textual value of a field.

    Scalars are rendered with str(). Missing or empty values, lists and
    mappings have no text. Multi-line strings are refused because their
    text cannot stay on the declaring line.
    """
    value = fields.get(key)

    if not value or isinstance(value, (list, dict)):
        return None

    text = value if isinstance(value, str) else str(value)
    # Block scalars ("|", ">") carry a trailing newline
    text = text.removesuffix('\n')

    if '\n' in text:
        logger.warning(f"Skipping multi-line '{key}' field")
        return None

    return text or None


def project(frontmatter: FrontMatter, key_lines: dict[str, int]) -> Projection:
    """
    Project front matter onto a blank skeleton of the same length.

    The title becomes a heading on its own line. The description, or the
    summary when there is no description, is copied onto its line. Only one
    of description and summary is ever substituted.

    Args:
        frontmatter: Located front matter block
        key_lines: Key to line index mapping from index_key_lines()

    Returns:
        Projection with frontmatter.line_count lines plus a trailing blank line
    """
    lines = [''] * (frontmatter.line_count + 1)
    offset = frontmatter.start_line

    title = field_text(frontmatter.fields, TITLE_FIELD)
    if title is not None and TITLE_FIELD in key_lines:
        lines[key_lines[TITLE_FIELD] - offset] = f"{HEADING_MARKER} {title}"

    for key in BODY_FIELDS:
        text = field_text(frontmatter.fields, key)
        if text is not None and key in key_lines:
            lines[key_lines[key] - offset] = text
            break

    return Projection(lines=lines)


def build_projection(text: str) -> Projection | None:
    """
    Build the projection for a whole document.

    Args:
        text: Raw document text

    Returns:
        Projection, or None when the document has nothing to lint

    Raises:
        FrontMatterError: If the front matter is not valid YAML
    """
    frontmatter = locate_frontmatter(text)
    if frontmatter is None:
        return None

    key_lines = index_key_lines(
        split_lines(text), frontmatter.start_line, frontmatter.end_line
    )
    projection = project(frontmatter, key_lines)

    if projection.is_blank():
        return None

    return projection
