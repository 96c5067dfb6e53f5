"""Report models produced by the report builder."""

from __future__ import annotations

import enum
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import TypeAlias


class Absence(enum.Enum):
    """Marker for a dependency a package does not declare."""

    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absence.ABSENT

Cell: TypeAlias = "str | Absence"


@dataclass(frozen=True)
class CategoryReport:
    """Dense package x dependency version table for one category."""

    category: str
    package_ids: tuple[str, ...]
    dependency_names: tuple[str, ...]
    matrix: Mapping[str, Mapping[str, Cell]]
    version_counts: Mapping[str, int]

    def version(self, package_id: str, name: str) -> Cell:
        return self.matrix[package_id][name]

    def row(self, package_id: str) -> list[Cell]:
        """Return a package's versions aligned to ``dependency_names``."""
        versions = self.matrix[package_id]
        return [versions[name] for name in self.dependency_names]

    def version_count_row(self) -> list[int]:
        return [self.version_counts[name] for name in self.dependency_names]

    @property
    def is_empty(self) -> bool:
        return not self.dependency_names and not self.package_ids


@dataclass(frozen=True)
class Report:
    """Per-category reports, in category order."""

    categories: Mapping[str, CategoryReport]

    def __iter__(self) -> Iterator[CategoryReport]:
        return iter(self.categories.values())

    def __getitem__(self, category: str) -> CategoryReport:
        return self.categories[category]

    def __len__(self) -> int:
        return len(self.categories)

    @property
    def category_names(self) -> list[str]:
        return list(self.categories)
