"""Lint front matter of markdown files with the external linter.

Drives the whole run: expand patterns, project each file into the cache,
run the linter once over the cache, strip the cache prefix from its output,
and always remove the cache before returning.
"""
from dataclasses import dataclass, field
from pathlib import Path
import glob
import logging

from rich.console import Console

from vale_frontmatter.config import Config
from vale_frontmatter.core.cache import ProjectionCache
from vale_frontmatter.core.projector import build_projection
from vale_frontmatter.core.runner import rewrite_output, run_linter
from vale_frontmatter.errors import CacheError, FrontMatterError

logger = logging.getLogger(__name__)


@dataclass
class LintRun:
    """Result of a lint run."""
    status: int = 0
    output: str = ""
    processed: int = 0
    skipped: int = 0
    failed: list[str] = field(default_factory=list)
    linted: bool = False


def expand_patterns(patterns: list[str], base_dir: Path | None = None) -> list[str]:
    """
    Expand glob patterns to file paths.

    "**" matches across directories. Matches are sorted per pattern and a
    file matched by several patterns is listed once, at its first match.
    Directories are dropped.
    """
    base_dir = Path(base_dir) if base_dir else Path.cwd()
    files: list[str] = []
    seen: set[str] = set()

    for pattern in patterns:
        for match in sorted(glob.glob(pattern, root_dir=base_dir, recursive=True)):
            if match in seen or not (base_dir / match).is_file():
                continue
            seen.add(match)
            files.append(match)

    return files


def process_file(file: str, cache: ProjectionCache) -> Path | None:
    """
    Project one file into the cache.

    Returns:
        Path of the cached projection, or None if the file has no lintable
        front matter

    Raises:
        FrontMatterError: If the front matter is not valid YAML
        CacheError: If the projection cannot be written
        OSError: If the file cannot be read
    """
    content = (cache.base_dir / file).read_text(encoding='utf-8')

    projection = build_projection(content)
    if projection is None:
        return None

    return cache.write(Path(file), projection)


def lint(
    patterns: list[str] | None = None,
    config: Config | None = None,
    filter_expr: str | None = None,
    verbose: bool = False,
    base_dir: Path | None = None,
    console: Console | None = None
) -> LintRun:
    """
    Lint the front matter of every file matching the patterns.

    Args:
        patterns: Glob patterns (default: config.default_pattern)
        config: Linter, timeout and temp directory (default: Config.load())
        filter_expr: Linter filter expression, passed through verbatim
        verbose: Print per-file progress
        base_dir: Directory patterns and reported paths are relative to
            (default: cwd)
        console: Console for progress output (default: stdout)

    Returns:
        LintRun; status is the linter's exit status, or 0 when no file had
        lintable front matter

    Raises:
        CacheError: If the cache root cannot be created
        LinterError: If the linter cannot be run or times out
    """
    config = config or Config.load()
    console = console or Console(highlight=False, markup=False, soft_wrap=True)
    patterns = list(patterns) if patterns else [config.default_pattern]

    cache = ProjectionCache.create(config.temp_dir, base_dir)
    result = LintRun()

    try:
        for file in expand_patterns(patterns, cache.base_dir):
            try:
                projected = process_file(file, cache)
            except (FrontMatterError, CacheError, OSError, UnicodeDecodeError) as e:
                logger.error(f"Error processing {file}: {e}")
                result.failed.append(file)
                continue

            if projected is None:
                logger.debug(f"Skipped: {file} (no lintable front matter)")
                result.skipped += 1
                continue

            result.processed += 1
            if verbose:
                # One line per file, whatever the terminal width
                console.print(f"Processed: {file} -> Preserving original line numbers", soft_wrap=True)

        if result.processed == 0:
            if verbose:
                logger.warning("No files with frontmatter found matching the patterns")
            return result

        linted = run_linter(cache.root, filter_expr, config)
        result.linted = True
        result.status = linted.status
        result.output = rewrite_output(linted.output, cache.root)

        return result

    finally:
        cache.cleanup()
