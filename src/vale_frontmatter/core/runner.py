"""Run the external linter and rewrite its output."""
from dataclasses import dataclass
from pathlib import Path
import logging
import os
import subprocess

from vale_frontmatter.config import Config
from vale_frontmatter.errors import LinterNotFoundError, LinterTimeoutError

logger = logging.getLogger(__name__)


@dataclass
class LinterResult:
    """Exit status and captured stdout of one linter run."""
    status: int
    output: str


def build_command(linter: str, cache_root: Path, filter_expr: str | None = None) -> list[str]:
    """Build the linter argv: <linter> [--filter=<expr>] <cache-root>."""
    command = [linter]
    if filter_expr:
        command.append(f"--filter={filter_expr}")
    command.append(str(cache_root))
    return command


def run_linter(
    cache_root: Path,
    filter_expr: str | None = None,
    config: Config | None = None
) -> LinterResult:
    """
    Run the linter once against the cache root.

    Stdout is captured; stderr goes straight to our stderr. A non-zero exit
    status is returned as-is, there are no retries.

    Args:
        cache_root: Directory holding the projections
        filter_expr: Filter expression passed through verbatim
        config: Linter executable and timeout (default: Config.load())

    Returns:
        LinterResult with the raw exit status and captured stdout

    Raises:
        LinterNotFoundError: If the linter executable cannot be started
        LinterTimeoutError: If the linter outlives config.timeout
    """
    config = config or Config.load()
    command = build_command(config.linter, cache_root, filter_expr)

    logger.debug(f"Running: {' '.join(command)}")

    try:
        proc = subprocess.run(
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            timeout=config.timeout,
            text=True,
            encoding='utf-8',
            errors='replace',
            check=False
        )
    except FileNotFoundError as e:
        raise LinterNotFoundError(f"Linter not found: {config.linter}") from e
    except PermissionError as e:
        raise LinterNotFoundError(f"Linter not executable: {config.linter}") from e
    except subprocess.TimeoutExpired as e:
        raise LinterTimeoutError(command, config.timeout) from e

    status = proc.returncode
    if status < 0:
        # Killed by a signal; report it the way a shell would
        status = 128 - status

    return LinterResult(status=status, output=proc.stdout or '')


def rewrite_output(output: str, cache_root: Path) -> str:
    """
    Strip the cache root prefix from linter output.

    Every "<cache-root>/" is removed so reported paths read as the original
    relative paths. Nothing else, line and column numbers included, changes.
    """
    prefixes = {f"{cache_root}{os.sep}"}

    # The linter may report the symlink-resolved path (/tmp vs /private/tmp)
    resolved = Path(cache_root).resolve()
    prefixes.add(f"{resolved}{os.sep}")

    # Longest first so a prefix is never half-removed by a shorter one
    for prefix in sorted(prefixes, key=len, reverse=True):
        output = output.replace(prefix, '')

    return output


def linter_available(config: Config | None = None) -> bool:
    """Check whether the linter can be executed (`<linter> --version`)."""
    config = config or Config.load()

    try:
        subprocess.run(
            [config.linter, "--version"],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            timeout=30,
            check=True
        )
        return True
    except (OSError, subprocess.SubprocessError):
        return False
