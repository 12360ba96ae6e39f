"""CLI for vale-frontmatter.

Extracts front matter from markdown files and lints it with Vale, reporting
diagnostics at the original files' line numbers.
"""
import argparse
import logging
import signal
import sys

from vale_frontmatter import __version__
from vale_frontmatter.config import Config, parse_timeout
from vale_frontmatter.errors import CacheError, LinterNotFoundError, LinterTimeoutError

logger = logging.getLogger(__name__)

EXIT_FATAL = 1
EXIT_TIMEOUT = 124
EXIT_NOT_FOUND = 127


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="vale-frontmatter",
        description="Lint markdown front matter with Vale, preserving line numbers",
        epilog=(
            'examples:\n'
            '  vale-frontmatter "docs/**/*.md"\n'
            '  vale-frontmatter --filter=".Name != \'AwesomeCo.Passive\'" "content/*.md"'
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "patterns", nargs="*",
        help="Glob patterns for files to lint (default: **/*.md)"
    )
    parser.add_argument(
        "-f", "--filter",
        help="Vale filter to apply"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Run with verbose logging"
    )
    parser.add_argument(
        "--timeout", type=parse_timeout, default=argparse.SUPPRESS,
        help="Seconds to wait for Vale, 0 to wait forever (default: 600)"
    )
    parser.add_argument(
        "--linter",
        help="Linter executable (default: vale)"
    )
    return parser


def _terminate(signum, frame):
    # Exit normally so pending cleanup still runs
    sys.exit(128 + signum)


def main(argv: list[str] | None = None):
    """Main entry point for the CLI."""
    args = build_parser().parse_args(argv)

    log_level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s: %(message)s"
    )

    signal.signal(signal.SIGTERM, _terminate)

    try:
        config = Config.load()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_FATAL)

    if args.linter:
        config.linter = args.linter
    if "timeout" in vars(args):
        config.timeout = args.timeout

    patterns = args.patterns
    if not patterns:
        patterns = [config.default_pattern]
        if args.verbose:
            print(f"No patterns provided, using default: {config.default_pattern} (current directory)")

    if args.verbose:
        print(f"Linting files matching: {', '.join(patterns)}")
        print(f"Using Vale filter: {args.filter or '(none)'}")

    from vale_frontmatter.lint import lint

    try:
        result = lint(
            patterns,
            config=config,
            filter_expr=args.filter,
            verbose=args.verbose
        )
    except CacheError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_FATAL)
    except LinterNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        print("Install Vale: https://vale.sh/docs/install", file=sys.stderr)
        sys.exit(EXIT_NOT_FOUND)
    except LinterTimeoutError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_TIMEOUT)
    except KeyboardInterrupt:
        print("\nCancelled by user", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        logger.error(f"Lint failed: {e}", exc_info=True)
        sys.exit(EXIT_FATAL)

    sys.stdout.write(result.output)
    sys.stdout.flush()

    sys.exit(result.status)


if __name__ == "__main__":
    main()
