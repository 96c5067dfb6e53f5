"""Plain-text run summary printed to stdout."""

from __future__ import annotations

from .core import RunResult


def render_summary(result: RunResult) -> str:
    """Return one bullet per category and a closing totals line."""
    lines = [f"* {name}" for name in result.report.category_names]
    lines.append(
        f"processed {len(result.report)} categories from "
        f"{len(result.collection.manifests)} packages "
        f"({len(result.collection.skipped_packages)} skipped)."
    )
    return "\n".join(lines) + "\n"
