"""Locate YAML front matter and map its keys to source lines."""
from dataclasses import dataclass, field
import logging
import re

import yaml

from vale_frontmatter.errors import FrontMatterError

logger = logging.getLogger(__name__)

DELIMITER = "---"

# "key:" at the very start of a line
KEY_PATTERN = re.compile(r'^(\w+):')


@dataclass
class FrontMatter:
    """A delimiter-bounded metadata block inside a document.

    Line indices are zero-based and point at the delimiter lines themselves.
    """
    start_line: int
    end_line: int
    fields: dict = field(default_factory=dict)

    @property
    def line_count(self) -> int:
        """Number of document lines covered by the block, delimiters included."""
        return self.end_line - self.start_line + 1


def split_lines(text: str) -> list[str]:
    """Split on newlines only, the way line-based linters count lines."""
    return text.split('\n')


def find_delimiters(lines: list[str]) -> tuple[int, int] | None:
    """
    Find the first two delimiter lines.

    Args:
        lines: Document lines

    Returns:
        Tuple of (start_line, end_line), or None if fewer than two delimiters
    """
    start_line = -1

    for i, line in enumerate(lines):
        if line.strip().lstrip('\ufeff') != DELIMITER:
            continue
        if start_line == -1:
            start_line = i
        else:
            return start_line, i

    return None


def parse_fields(lines: list[str], start_line: int, end_line: int) -> dict:
    """
    Parse the YAML between two delimiter lines.

    Only a block opening the document counts as front matter; anything else
    (a pair of horizontal rules, say) yields no fields.

    Raises:
        FrontMatterError: If the block is not valid YAML or holds an
            invalid value
    """
    if start_line != 0:
        return {}

    block = '\n'.join(lines[start_line + 1:end_line])

    try:
        data = yaml.safe_load(block)
    except (yaml.YAMLError, ValueError) as e:
        # ValueError: PyYAML rejects impossible dates such as 2024-02-30
        raise FrontMatterError(f"Invalid YAML front matter: {e}") from e

    if not isinstance(data, dict):
        if data is not None:
            logger.debug("Front matter is not a mapping, ignoring")
        return {}

    return data


def locate_frontmatter(text: str) -> FrontMatter | None:
    """
    Locate the front matter block of a document.

    Args:
        text: Raw document text

    Returns:
        FrontMatter, or None when the document has no block or the block
        declares no fields

    Raises:
        FrontMatterError: If the block is not valid YAML or holds an
            invalid value
    """
    lines = split_lines(text)

    span = find_delimiters(lines)
    if span is None:
        return None

    start_line, end_line = span
    fields = parse_fields(lines, start_line, end_line)
    if not fields:
        return None

    return FrontMatter(start_line=start_line, end_line=end_line, fields=fields)


def index_key_lines(lines: list[str], start_line: int, end_line: int) -> dict[str, int]:
    """
    Map each top-level key in the block interior to the line declaring it.

    Only unindented lines are considered, so keys nested under another key
    never shadow a top-level one. List items and continuation lines are not
    recognized. A key declared twice maps to its last declaration, matching
    the value YAML keeps.

    Args:
        lines: Document lines
        start_line: Index of the opening delimiter
        end_line: Index of the closing delimiter

    Returns:
        Dict mapping key to zero-based line index
    """
    key_lines: dict[str, int] = {}

    for i in range(start_line + 1, end_line):
        line = lines[i]
        if line[:1].isspace():
            continue

        match = KEY_PATTERN.match(line.rstrip())
        if match:
            key_lines[match.group(1)] = i

    return key_lines
