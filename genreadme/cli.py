"""CLI entrypoint for gen-readme."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

from .config import GenReadmeError
from .logging import configure_logging
from .pipeline import ReadmePipeline
from .renderer import ReadmeRenderer

# Pause before exiting on unexpected errors.
EXIT_DELAY_SECONDS = 3.0

_EPILOG = """\
examples:
  gen-readme package.json > README.md
  gen-readme package.json --travis --xo
  gen-readme package.json --write
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gen-readme",
        description="Generate a README.md from package.json metadata.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project directory or path to its package.json (defaults to current directory).",
    )
    parser.add_argument("--travis", action="store_true", help="Force enable the Travis CI badge.")
    parser.add_argument("--xo", action="store_true", help="Force enable the XO code style badge.")
    parser.add_argument("-w", "--write", action="store_true", help="Also write the output to README.md.")
    parser.add_argument(
        "--template",
        type=Path,
        default=None,
        help="Render with a custom Jinja2 template instead of the bundled one.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Increase log verbosity for troubleshooting.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for gen-readme."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    logger = configure_logging(verbose=bool(args.verbose))
    flags = {"travis": args.travis, "xo": args.xo, "write": args.write}

    try:
        pipeline = ReadmePipeline(renderer=ReadmeRenderer(args.template))
        result = pipeline.run(args.path, flags)
    except GenReadmeError as exc:
        parser.exit(1, f"gen-readme: {exc}\n")
    except Exception as exc:
        logger.error("gen-readme failed: %s", exc, exc_info=bool(args.verbose))
        time.sleep(EXIT_DELAY_SECONDS)
        parser.exit(1, "Run with --verbose for more details.\n")

    sys.stdout.write(result.text)


if __name__ == "__main__":
    main(sys.argv[1:])
