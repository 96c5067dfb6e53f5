"""Command-line entrypoint.

Usage:
  npm-drift <output.xlsx> <root> [<root> ...]
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .config import parse_args
from .core import run
from .errors import ConfigError, ExportError
from .logging_config import setup_logging
from .summary import render_summary


def main(argv: Sequence[str] | None = None) -> int:
    try:
        settings = parse_args(argv)
    except ConfigError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    setup_logging()

    try:
        result = run(settings)
    except ExportError as exc:
        print(f"ERROR: Failed to write report: {exc}", file=sys.stderr)
        return 1

    print(render_summary(result), end="")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
