"""Core modules for front matter projection and linting."""
from .frontmatter import FrontMatter, index_key_lines, locate_frontmatter
from .projector import Projection, build_projection, project
from .cache import ProjectionCache
from .runner import LinterResult, linter_available, rewrite_output, run_linter

__all__ = [
    "FrontMatter",
    "index_key_lines",
    "locate_frontmatter",
    "Projection",
    "build_projection",
    "project",
    "ProjectionCache",
    "LinterResult",
    "linter_available",
    "rewrite_output",
    "run_linter",
]
