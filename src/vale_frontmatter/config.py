"""Configuration management with environment variable overrides."""
from dataclasses import dataclass, field
from pathlib import Path
import math
import os
import tempfile

TOOL_NAME = "vale-frontmatter"

# Longest linter timeout accepted, in seconds (one week)
MAX_TIMEOUT = 7 * 24 * 60 * 60.0


@dataclass
class Config:
    """Configuration for a vale-frontmatter run."""

    # Linter executable (name on PATH or absolute path)
    linter: str = "vale"

    # Seconds to wait for the linter before killing it (None = wait forever)
    timeout: float | None = 600.0

    # Parent directory for per-invocation cache roots
    temp_dir: Path = field(
        default_factory=lambda: Path(tempfile.gettempdir()) / TOOL_NAME
    )

    # Glob used when no patterns are given
    default_pattern: str = "**/*.md"

    @classmethod
    def load(cls) -> "Config":
        """Load config with environment variable overrides."""
        config = cls()

        if val := os.environ.get("VALE_FRONTMATTER_LINTER"):
            config.linter = val

        if val := os.environ.get("VALE_FRONTMATTER_TIMEOUT"):
            try:
                config.timeout = parse_timeout(val)
            except ValueError as e:
                raise ValueError(f"Invalid VALE_FRONTMATTER_TIMEOUT: {e}") from e

        if val := os.environ.get("VALE_FRONTMATTER_TEMP_DIR"):
            config.temp_dir = Path(val).expanduser()

        return config


def parse_timeout(value: str) -> float | None:
    """
    Parse a timeout in seconds; zero or negative disables the timeout.

    Raises:
        ValueError: If the value is not a number, is not finite, or exceeds
            MAX_TIMEOUT
    """
    seconds = float(value)
    if not math.isfinite(seconds):
        raise ValueError(f"timeout must be finite: {value!r}")
    if seconds > MAX_TIMEOUT:
        raise ValueError(f"timeout must be at most {MAX_TIMEOUT:g}s: {value!r}")
    return seconds if seconds > 0 else None
