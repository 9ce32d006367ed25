"""File I/O: batch queries from .txt/.csv/.xlsx, cross-reference results to Excel."""

from __future__ import annotations

import csv
import io
import logging
from dataclasses import dataclass
from pathlib import Path

from core.msrp import MSRPLookup, format_price
from core.query_parser import MAX_BATCH_SIZE, parse_batch
from core.utils.excel_io import cell_value, open_excel_read, write_sheet
from models.schemas import BatchItem

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".txt", ".csv", ".xlsx")

# input column names, compared case-insensitively
INPUT_MODEL_COLS = ("model", "model number", "part number", "competitor model")
INPUT_MOUNT_COLS = ("mount", "mount type", "placement")

RESULT_HEADERS = (
    "Input",
    "Query Type",
    "Confidence",
    "Competitor Model",
    "Manufacturer",
    "Axis Replacement",
    "Score",
    "Tier",
    "URL",
    "URL Confidence",
    "MSRP",
    "Suggestions",
    "Mount",
    "Mount Confidence",
)
LOW_CONFIDENCE = ("none", "low")
_CONFIDENCE_COL = RESULT_HEADERS.index("Confidence")

ResultRow = tuple[str, str, str, str, str, str, str, str, str, str, str, str, str, str]

# one query with its optional free-text mount type
InputRow = tuple[str, str | None]


def _find_column(header: list[str], names: tuple[str, ...]) -> int | None:
    """0-based index of the first header cell matching any of names."""
    for i, h in enumerate(header):
        if h and h.strip().lower() in names:
            return i
    return None


def _read_xlsx(path: Path) -> list[InputRow]:
    """Model column by header name, else the first column; optional mount column."""
    with open_excel_read(path) as (_wb, ws):
        if ws is None:
            return []
        rows = [list(r) for r in ws.iter_rows(values_only=True) if r]
    if not rows:
        return []
    header = [cell_value(v) for v in rows[0]]
    col_model = _find_column(header, INPUT_MODEL_COLS)
    col_mount = _find_column(header, INPUT_MOUNT_COLS)
    if col_model is None:
        col_model, data = 0, rows
    else:
        data = rows[1:]

    result: list[InputRow] = []
    for row in data:
        query = cell_value(row[col_model]) if col_model < len(row) else ""
        if not query:
            continue
        mount = cell_value(row[col_mount]) if col_mount is not None and col_mount < len(row) else ""
        result.append((query, mount or None))
    return result


def _read_csv(text: str) -> list[InputRow]:
    rows = [r for r in csv.reader(io.StringIO(text)) if any(c.strip() for c in r)]
    if not rows:
        return []
    header = [c.strip() for c in rows[0]]
    col_model = _find_column(header, INPUT_MODEL_COLS)
    col_mount = _find_column(header, INPUT_MOUNT_COLS)
    if col_model is None:
        col_model, data = 0, rows
    else:
        data = rows[1:]
    result: list[InputRow] = []
    for row in data:
        query = row[col_model].strip() if col_model < len(row) else ""
        if not query:
            continue
        mount = row[col_mount].strip() if col_mount is not None and col_mount < len(row) else ""
        result.append((query, mount or None))
    return result


@dataclass(frozen=True)
class QueryFile:
    """Rows kept from one input file, with the count found before the cap."""

    rows: list[InputRow]
    total: int

    @property
    def dropped(self) -> int:
        return self.total - len(self.rows)


def read_query_file(file_path: Path, max_size: int = MAX_BATCH_SIZE) -> QueryFile:
    """
    Read batch queries. .txt is split like pasted text (lines, commas, semicolons, tabs);
    .csv and .xlsx use a Model column (or the first column) and an optional Mount column.
    Rows beyond max_size are dropped with a warning; QueryFile.dropped reports how many.
    """
    path = Path(file_path)
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise RuntimeError(f"Unsupported input file type: {path.suffix or path.name}")
    if not path.exists():
        raise RuntimeError(f"File not found: {path}")

    if suffix == ".txt":
        parsed = parse_batch(path.read_text(encoding="utf-8-sig"), max_size)
        return QueryFile(rows=[(q, None) for q in parsed.items], total=parsed.total)
    if suffix == ".csv":
        rows = _read_csv(path.read_text(encoding="utf-8-sig"))
    else:
        rows = _read_xlsx(path)
    if len(rows) > max_size:
        logger.warning("Batch file %s truncated: %d rows, keeping the first %d", path.name, len(rows), max_size)
    return QueryFile(rows=rows[:max_size], total=len(rows))


def read_queries_from_file(file_path: Path, max_size: int = MAX_BATCH_SIZE) -> list[InputRow]:
    return read_query_file(file_path, max_size).rows


def build_result_row(item: BatchItem, msrp: MSRPLookup | None = None) -> ResultRow:
    response = item.response
    best = response.best if response is not None else None
    pairing = item.mount_pairing
    mount = ""
    if pairing is not None and pairing.mount is not None:
        mount = pairing.mount.model_key
    price = ""
    if best is not None and msrp is not None:
        price = format_price(msrp.get_price(best.axis_model))
    return (
        item.query,
        response.query_type if response is not None else "",
        response.confidence if response is not None else "none",
        best.source_model if best else "",
        best.manufacturer if best else "",
        best.axis_model if best else "",
        "" if best is None or best.score is None else str(best.score),
        best.tier if best else "",
        (best.url or "") if best else "",
        (best.url_confidence or "") if best else "",
        price,
        ", ".join(response.suggestions) if response is not None else "",
        mount,
        pairing.confidence if pairing is not None else "",
    )


def write_result_excel(items: list[BatchItem], output_path: Path, msrp: MSRPLookup | None = None) -> None:
    """One row per input; rows with low or no confidence are red."""
    rows = [build_result_row(item, msrp) for item in items]
    write_sheet(
        Path(output_path),
        "Cross Reference",
        RESULT_HEADERS,
        rows,
        failed_row_predicate=lambda r: r[_CONFIDENCE_COL] in LOW_CONFIDENCE,
        column_widths={1: 24, 4: 24, 6: 20, 9: 48, 12: 36},
    )
