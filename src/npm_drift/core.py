"""Core scanning entrypoints.

Walks each monorepo root, loads the root and per-package manifests and turns
every attempt into an outcome value. Failures to list or load are isolated to
the root or package concerned; only the export stage is allowed to abort a
run.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeAlias

import structlog

from .config import Settings
from .discovery import list_packages, packages_dir, root_package_id
from .errors import EnumerationError, LoadError
from .export import export_report
from .models import Manifest, ManifestSet, Report
from .parsers.package_json import load_manifest
from .report import build_report

log = structlog.get_logger(__name__)

Loader: TypeAlias = Callable[[Path], Manifest]
Lister: TypeAlias = Callable[[Path], list[str]]


@dataclass(frozen=True, slots=True)
class Loaded:
    package_id: str
    path: Path
    manifest: Manifest


@dataclass(frozen=True, slots=True)
class Skipped:
    """A root, packages directory or package left out of the report."""

    package_id: str | None
    path: Path
    reason: str


LoadOutcome: TypeAlias = "Loaded | Skipped"


@dataclass(slots=True)
class Collection:
    """Manifests gathered in one run plus the reasons anything was skipped."""

    manifests: ManifestSet = field(default_factory=dict)
    skipped: list[Skipped] = field(default_factory=list)

    def add(self, outcome: LoadOutcome) -> None:
        if isinstance(outcome, Skipped):
            self.skipped.append(outcome)
            return
        if outcome.package_id in self.manifests:
            log.warning(
                "duplicate_package_id",
                package=outcome.package_id,
                path=str(outcome.path),
            )
        self.manifests[outcome.package_id] = outcome.manifest

    @property
    def skipped_packages(self) -> list[Skipped]:
        """Skips of a root or package manifest, excluding unlistable directories."""
        return [skip for skip in self.skipped if skip.package_id is not None]


@dataclass(frozen=True, slots=True)
class RunResult:
    settings: Settings
    collection: Collection
    report: Report


def attempt_load(
    package_id: str,
    directory: Path,
    loader: Loader = load_manifest,
) -> LoadOutcome:
    """Load one manifest, converting a LoadError into a Skipped outcome."""
    try:
        manifest = loader(directory)
    except LoadError as exc:
        return Skipped(package_id=package_id, path=directory, reason=str(exc.cause))
    return Loaded(package_id=package_id, path=directory, manifest=manifest)


def collect_root(
    root: Path,
    collection: Collection,
    loader: Loader = load_manifest,
    lister: Lister = list_packages,
) -> None:
    """Add the manifests of one monorepo root to ``collection``."""
    root_id = root_package_id(root)
    outcome = attempt_load(root_id, root, loader)
    if isinstance(outcome, Skipped):
        log.warning(
            "root_manifest_skipped",
            package=root_id,
            path=str(root),
            error=outcome.reason,
        )
    collection.add(outcome)

    parent = packages_dir(root)
    try:
        names = lister(parent)
    except EnumerationError as exc:
        log.warning("packages_dir_skipped", path=str(parent), error=str(exc.cause))
        collection.add(Skipped(package_id=None, path=parent, reason=str(exc.cause)))
        names = []

    total = len(names)
    for index, name in enumerate(names, start=1):
        log.info("package", progress=f"[{index}/{total}]", package=name)
        outcome = attempt_load(name, parent / name, loader)
        if isinstance(outcome, Skipped):
            log.error(
                "package_manifest_skipped",
                package=name,
                path=str(outcome.path),
                error=outcome.reason,
            )
        collection.add(outcome)


def collect_manifests(
    roots: Iterable[Path],
    loader: Loader = load_manifest,
    lister: Lister = list_packages,
) -> Collection:
    """Collect manifests from every root, in argument order."""
    collection = Collection()
    for root in roots:
        collect_root(root, collection, loader=loader, lister=lister)
    return collection


def run(
    settings: Settings,
    loader: Loader = load_manifest,
    lister: Lister = list_packages,
) -> RunResult:
    """Scan ``settings.roots`` and write the workbook to ``settings.output_path``.

    Raises ExportError when the workbook cannot be written.
    """
    collection = collect_manifests(settings.roots, loader=loader, lister=lister)
    log.info(
        "manifests_collected",
        packages=len(collection.manifests),
        skipped=len(collection.skipped),
    )
    report = build_report(collection.manifests)
    export_report(report, settings.output_path)
    return RunResult(settings=settings, collection=collection, report=report)
