"""Error types raised by the scanning and export stages."""

from __future__ import annotations

from pathlib import Path


class DriftError(RuntimeError):
    """Base error for npm-drift failures."""


class ConfigError(DriftError):
    """Raised when the command-line settings are unusable."""


class _PathError(DriftError):
    """Error bound to a filesystem path and the exception that caused it."""

    def __init__(self, path: Path | str, cause: BaseException) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"{self.path}: {cause}")


class LoadError(_PathError):
    """Raised when a directory's manifest is missing or malformed."""


class EnumerationError(_PathError):
    """Raised when a packages directory cannot be listed."""


class ExportError(_PathError):
    """Raised when the report workbook cannot be written."""
