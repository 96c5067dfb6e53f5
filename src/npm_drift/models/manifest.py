"""Manifest model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, TypeAlias

DEPENDENCY_CATEGORIES: tuple[str, ...] = (
    "dependencies",
    "devDependencies",
    "peerDependencies",
)

_FIELDS = {
    "dependencies": "dependencies",
    "devDependencies": "dev_dependencies",
    "peerDependencies": "peer_dependencies",
}


@dataclass(frozen=True)
class Manifest:
    """Declared dependencies of a single package, split by category."""

    dependencies: Mapping[str, str] = field(default_factory=dict)
    dev_dependencies: Mapping[str, str] = field(default_factory=dict)
    peer_dependencies: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for category, attr in _FIELDS.items():
            value = getattr(self, attr)
            if not isinstance(value, Mapping):
                raise TypeError(
                    f"{category} must be a mapping of name to version, "
                    f"got {type(value).__name__}"
                )

    def category(self, name: str) -> Mapping[str, str]:
        """Return the mapping stored under a JSON category name."""
        try:
            attr = _FIELDS[name]
        except KeyError:
            raise KeyError(f"Unknown dependency category: {name}") from None
        return getattr(self, attr)

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {category: dict(self.category(category)) for category in DEPENDENCY_CATEGORIES}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Manifest:
        """Build a manifest from a decoded ``package.json`` document.

        Missing or ``null`` categories become empty mappings and any other
        non-mapping value is rejected with TypeError. Remaining top-level
        fields are ignored.
        """
        values = {}
        for category, attr in _FIELDS.items():
            section = data.get(category)
            if section is None:
                section = {}
            elif isinstance(section, Mapping):
                section = dict(section)
            values[attr] = section
        return cls(**values)


ManifestSet: TypeAlias = dict[str, Manifest]
