"""Monorepo package discovery utilities."""

from __future__ import annotations

from pathlib import Path

from .errors import EnumerationError

PACKAGES_DIRNAME = "packages"
ROOT_ID_PREFIX = "root:"


def packages_dir(root: Path) -> Path:
    return root / PACKAGES_DIRNAME


def root_package_id(root: Path) -> str:
    """Return the synthetic package id used for a monorepo's own manifest.

    The ``root:`` prefix keeps it apart from ordinary package names, which are
    plain directory names.
    """
    name = root.resolve().name or str(root)
    return f"{ROOT_ID_PREFIX}{name}"


def list_packages(parent: Path) -> list[str]:
    """Return the names of the immediate entries under ``parent``.

    Order is whatever the filesystem yields. Raises EnumerationError when the
    directory is missing or cannot be read.
    """
    try:
        return [entry.name for entry in parent.iterdir()]
    except OSError as exc:
        raise EnumerationError(parent, exc) from exc
