"""Data models for manifests and version reports."""

from __future__ import annotations

from .manifest import DEPENDENCY_CATEGORIES, Manifest, ManifestSet
from .report import ABSENT, Absence, CategoryReport, Cell, Report

__all__ = [
    "ABSENT",
    "Absence",
    "CategoryReport",
    "Cell",
    "DEPENDENCY_CATEGORIES",
    "Manifest",
    "ManifestSet",
    "Report",
]
