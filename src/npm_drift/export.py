"""Write a version report to an Excel workbook."""

from __future__ import annotations

from pathlib import Path

import structlog
from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.worksheet.worksheet import Worksheet

from .errors import ExportError
from .models import ABSENT, CategoryReport, Report

log = structlog.get_logger(__name__)

VERSION_COUNT_LABEL = "version_count"
FROZEN_CELL = "B2"


def _append_row(sheet: Worksheet, values: list[object]) -> None:
    """Append ``values``, storing strings as text even when they start with ``=``.

    Control characters that XML cannot carry are dropped.
    """
    sheet.append(
        [ILLEGAL_CHARACTERS_RE.sub("", v) if isinstance(v, str) else v for v in values]
    )
    for cell in sheet[sheet.max_row]:
        if isinstance(cell.value, str):
            cell.data_type = "s"


def _fill_sheet(sheet: Worksheet, table: CategoryReport) -> None:
    _append_row(sheet, [None, *table.dependency_names])
    _append_row(sheet, [VERSION_COUNT_LABEL, *table.version_count_row()])
    for package_id in table.package_ids:
        versions = [None if v is ABSENT else v for v in table.row(package_id)]
        _append_row(sheet, [package_id, *versions])
    # first row and first column stay visible
    sheet.freeze_panes = FROZEN_CELL


def build_workbook(report: Report) -> Workbook:
    """Return a workbook with one sheet per report category."""
    workbook = Workbook()
    workbook.remove(workbook.active)
    for table in report:
        _fill_sheet(workbook.create_sheet(title=table.category), table)
    return workbook


def export_report(report: Report, destination: Path) -> None:
    """Save ``report`` to ``destination``; raises ExportError on write failure."""
    workbook = build_workbook(report)
    try:
        workbook.save(destination)
    except OSError as exc:
        raise ExportError(destination, exc) from exc
    log.info("report_written", path=str(destination), sheets=len(report))
