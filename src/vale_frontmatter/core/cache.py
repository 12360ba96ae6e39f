"""Temporary on-disk store for projections.

Each invocation gets its own cache root under the configured temp directory:

    <temp_dir>/<pid>-<random>/<path relative to cwd>

so concurrent runs never share files, and the linter reports paths that
mirror the originals once the root prefix is stripped.
"""
from __future__ import annotations

from pathlib import Path
import logging
import os
import shutil
import tempfile

from vale_frontmatter.errors import CacheError

from .projector import Projection

logger = logging.getLogger(__name__)


class ProjectionCache:
    """Writes projections under a per-invocation cache root."""

    def __init__(self, root: Path, base_dir: Path | None = None):
        """
        Args:
            root: Cache root directory (must exist before writing)
            base_dir: Directory original paths are made relative to (default: cwd)
        """
        self.root = Path(root)
        self.base_dir = Path(base_dir) if base_dir else Path.cwd()

    @classmethod
    def create(cls, temp_dir: Path, base_dir: Path | None = None) -> ProjectionCache:
        """
        Create a fresh, uniquely named cache root.

        Raises:
            CacheError: If the root cannot be created
        """
        try:
            temp_dir = Path(temp_dir)
            temp_dir.mkdir(parents=True, exist_ok=True)
            root = tempfile.mkdtemp(prefix=f"{os.getpid()}-", dir=temp_dir)
        except OSError as e:
            raise CacheError(f"Cannot create cache directory in {temp_dir}: {e}") from e

        logger.debug(f"Cache root: {root}")
        return cls(Path(root), base_dir)

    def path_for(self, source: Path) -> Path:
        """
        Get the cache path mirroring a source file.

        Files outside base_dir are mirrored by their absolute path minus the
        anchor, so nothing is ever written outside the root.
        """
        source = Path(source)
        absolute = source if source.is_absolute() else self.base_dir / source
        absolute = Path(os.path.normpath(absolute))

        try:
            relative = absolute.relative_to(self.base_dir)
        except ValueError:
            relative = Path(*absolute.parts[1:])

        return self.root / relative

    def write(self, source: Path, projection: Projection) -> Path:
        """
        Write a projection for a source file, replacing any previous one.

        Returns:
            Path of the written projection

        Raises:
            CacheError: If the file cannot be written
        """
        target = self.path_for(source)

        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(projection.text, encoding='utf-8')
        except OSError as e:
            raise CacheError(f"Cannot write projection {target}: {e}") from e

        return target

    def cleanup(self) -> None:
        """Delete the cache root and everything in it."""
        if self.root.exists():
            shutil.rmtree(self.root, ignore_errors=True)
            logger.debug(f"Removed cache root: {self.root}")
