"""Shared pytest fixtures for npm-drift tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest


def write_manifest(directory: Path, data: dict | str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / "package.json"
    text = data if isinstance(data, str) else json.dumps(data)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def make_monorepo(tmp_path):
    """Return a factory building ``<tmp>/<name>`` with optional packages.

    ``packages`` maps package directory name to a manifest dict (or raw text);
    ``None`` creates the directory without a package.json.
    """

    def factory(name: str, root_manifest=None, packages=None) -> Path:
        root = tmp_path / name
        root.mkdir()
        if root_manifest is not None:
            write_manifest(root, root_manifest)
        if packages is not None:
            pkg_dir = root / "packages"
            pkg_dir.mkdir()
            for pkg_name, manifest in packages.items():
                if manifest is None:
                    (pkg_dir / pkg_name).mkdir()
                else:
                    write_manifest(pkg_dir / pkg_name, manifest)
        return root

    return factory
