"""Command-line settings.

Arguments are parsed once at the boundary into an immutable ``Settings`` value
that is passed down; nothing below the CLI reads ``sys.argv``.
"""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigError

PROG = "npm-drift"
DESCRIPTION = (
    "Compare the dependency versions requested by every package of one or more "
    "monorepos and write the comparison to an Excel workbook."
)


@dataclass(slots=True, frozen=True)
class Settings:
    """Resolved run configuration."""

    output_path: Path
    roots: tuple[Path, ...]

    def __post_init__(self) -> None:
        if not self.roots:
            raise ConfigError("At least one root directory is required")
        if self.output_path.is_dir():
            raise ConfigError(f"Output path is a directory: {self.output_path}")

    @classmethod
    def from_namespace(cls, args: argparse.Namespace) -> Settings:
        return cls(output_path=args.output, roots=tuple(args.roots))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=PROG, description=DESCRIPTION)
    parser.add_argument("output", type=Path, help="Path of the .xlsx workbook to write")
    parser.add_argument(
        "roots",
        type=Path,
        nargs="+",
        help="Monorepo root directories; packages are read from <root>/packages/*",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> Settings:
    """Parse ``argv`` into Settings.

    argparse exits with status 2 on usage errors; ConfigError is raised for
    arguments that parse but cannot be used.
    """
    args = build_parser().parse_args(argv)
    return Settings.from_namespace(args)
