"""Pivot per-package manifests into per-category version tables."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable, Mapping

from .models import (
    ABSENT,
    DEPENDENCY_CATEGORIES,
    CategoryReport,
    Cell,
    Manifest,
    Report,
)


def dependency_universe(manifests: Mapping[str, Manifest], category: str) -> set[str]:
    """Return every dependency name declared in ``category`` by any package."""
    names: set[str] = set()
    for manifest in manifests.values():
        names.update(manifest.category(category))
    return names


def version_matrix(
    manifests: Mapping[str, Manifest],
    category: str,
    names: Iterable[str],
) -> dict[str, dict[str, Cell]]:
    """Return package id -> name -> declared version, ABSENT when undeclared."""
    names = list(names)
    matrix: dict[str, dict[str, Cell]] = {}
    for package_id, manifest in manifests.items():
        declared = manifest.category(category)
        matrix[package_id] = {name: declared.get(name, ABSENT) for name in names}
    return matrix


def version_counts(matrix: Mapping[str, Mapping[str, Cell]]) -> dict[str, int]:
    """Count distinct declared version strings per dependency name."""
    seen: dict[str, set[str]] = defaultdict(set)
    for versions in matrix.values():
        for name, version in versions.items():
            bucket = seen[name]
            if version is not ABSENT:
                bucket.add(version)
    return {name: len(values) for name, values in seen.items()}


def build_category(manifests: Mapping[str, Manifest], category: str) -> CategoryReport:
    names = tuple(sorted(dependency_universe(manifests, category)))
    matrix = version_matrix(manifests, category, names)
    return CategoryReport(
        category=category,
        package_ids=tuple(manifests),
        dependency_names=names,
        matrix=matrix,
        version_counts=version_counts(matrix),
    )


def build_report(
    manifests: Mapping[str, Manifest],
    categories: Iterable[str] = DEPENDENCY_CATEGORIES,
) -> Report:
    """Build the version report for every dependency category.

    Dependency names are sorted; package ids keep the mapping's order. An
    empty mapping yields empty tables rather than an error.
    """
    for package_id, manifest in manifests.items():
        if not isinstance(manifest, Manifest):
            raise TypeError(
                f"Manifest for {package_id!r} must be a Manifest, got {type(manifest).__name__}"
            )
    return Report(
        categories={category: build_category(manifests, category) for category in categories}
    )
