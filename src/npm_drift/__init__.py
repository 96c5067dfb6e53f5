"""npm-drift core package.

Collects ``package.json`` manifests across one or more monorepos and renders a
per-category dependency version comparison workbook.
"""

__all__ = [
    "core",
    "report",
]
