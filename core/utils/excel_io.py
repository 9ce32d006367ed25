"""Excel helpers: read-only workbook access, cell text, header + rows writing with failed rows in red."""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable

import openpyxl  # type: ignore[import-untyped]
from openpyxl.styles import Font  # type: ignore[import-untyped]
from openpyxl.utils import get_column_letter  # type: ignore[import-untyped]


def cell_value(cell_or_value: Any) -> str:
    """Accept an openpyxl Cell or a bare value (iter_rows values_only=True) and return stripped text."""
    v = getattr(cell_or_value, "value", cell_or_value)
    if v is None:
        return ""
    return str(v).strip()


@contextmanager
def open_excel_read(path: Path):
    """Open read-only with data_only, yield (wb, ws) and close the workbook on exit."""
    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    try:
        yield wb, wb.active
    finally:
        wb.close()


def write_sheet(
    output_path: Path,
    sheet_title: str,
    headers: tuple[str, ...],
    rows: list[tuple[Any, ...]],
    *,
    failed_row_predicate: Callable[[tuple[Any, ...]], bool] | None = None,
    red_font_hex: str = "FF0000",
    column_widths: dict[int, int] | None = None,
) -> None:
    """Write one header row and the data rows; rows for which failed_row_predicate is true are red."""
    wb = openpyxl.Workbook()
    ws = wb.active
    if ws is None:
        raise RuntimeError("Could not create worksheet")
    ws.title = sheet_title
    red_font = Font(color=red_font_hex)
    bold_font = Font(bold=True)
    for col, h in enumerate(headers, start=1):
        ws.cell(row=1, column=col, value=h).font = bold_font
    for row_idx, row_data in enumerate(rows, start=2):
        failed = bool(failed_row_predicate and failed_row_predicate(row_data))
        for col_idx, value in enumerate(row_data, start=1):
            cell = ws.cell(row=row_idx, column=col_idx, value=value)
            if failed:
                cell.font = red_font
    for col, width in (column_widths or {}).items():
        ws.column_dimensions[get_column_letter(col)].width = width
    ws.freeze_panes = "A2"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(output_path)
