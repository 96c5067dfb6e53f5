"""Load package.json and validate its dependency sections."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator, ValidationError

from ..errors import LoadError
from ..models import DEPENDENCY_CATEGORIES, Manifest

MANIFEST_FILENAME = "package.json"

_SECTION_SCHEMA = {
    "type": ["object", "null"],
    "additionalProperties": {"type": "string"},
}

MANIFEST_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "properties": {category: _SECTION_SCHEMA for category in DEPENDENCY_CATEGORIES},
}

_VALIDATOR = Draft202012Validator(MANIFEST_SCHEMA)


class ManifestShapeError(ValueError):
    """Raised when a manifest does not match the expected structure."""


def _format_errors(errors: Iterable[ValidationError]) -> str:
    messages = []
    for error in errors:
        pointer = "/".join(str(p) for p in error.path)
        messages.append(f"{pointer or '<root>'}: {error.message}")
    return "; ".join(messages)


def validate(data: Any) -> None:
    """Raise ManifestShapeError when ``data`` is not a usable manifest."""
    errors = sorted(_VALIDATOR.iter_errors(data), key=lambda e: [str(p) for p in e.path])
    if errors:
        raise ManifestShapeError(_format_errors(errors))


def load_manifest(directory: Path) -> Manifest:
    """Return the manifest stored in ``directory``.

    Raises LoadError, carrying the directory and the underlying exception,
    when the file is missing, is not JSON, or has malformed dependency
    sections.
    """
    path = directory / MANIFEST_FILENAME
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise LoadError(directory, exc) from exc

    try:
        validate(data)
    except ManifestShapeError as exc:
        raise LoadError(directory, exc) from exc

    return Manifest.from_dict(data)
