"""
Axis cross-reference CLI: load the datasets, then answer single queries or batch files.

Flow: init_config -> load_data -> (loop) run_query / process_file -> save_output,
split up so each step can be tested on its own.
"""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from app import normalize_input_path, read_query_file, run_batch_search, write_result_excel
from bootstrap import CatalogServices, init_services, load_services
from core.config import BatchSettings, get_data_dir, get_log_dir, get_output_dir, get_app_config, inject, load_app_config
from core.errors import DatasetError
from core.query_parser import validate_query
from core.utils import normalize_voice
from models.schemas import BatchItem, RunConfigSchema, SearchResponse

RunConfig = RunConfigSchema

QUIT_WORDS = ("q", "quit", "exit")
_SUPPORTED_FILES = (".txt", ".csv", ".xlsx")


def init_config(
    *,
    data_dir: Path | None = None,
    output_dir: Path | None = None,
    log_dir: Path | None = None,
) -> RunConfigSchema:
    """Load app_config.yaml, set up file logging and return the runtime directories."""
    load_app_config()
    config = RunConfigSchema(
        data_dir=data_dir or get_data_dir(),
        output_dir=output_dir or get_output_dir(),
        log_dir=log_dir or get_log_dir(),
        app=get_app_config().app,
    )
    _setup_logging(config.log_dir)
    print(f"Config loaded: data_dir={config.data_dir}, output_dir={config.output_dir}")
    return config


def _setup_logging(log_dir: Path) -> None:
    """
    Log to log_dir/axis_crossref_YYYYMMDD.log. A FileHandler already pointing at
    today's file is not added twice.
    """
    log_dir.mkdir(parents=True, exist_ok=True)
    today = datetime.now().strftime("%Y%m%d")
    log_file = log_dir / f"axis_crossref_{today}.log"
    log_path = str(log_file.resolve())
    root = logging.getLogger()
    root.setLevel(logging.INFO)
    for h in root.handlers:
        if isinstance(h, logging.FileHandler) and getattr(h, "baseFilename", "") == log_path:
            return
    fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(fmt))
    root.addHandler(handler)


def load_data(config: RunConfigSchema) -> CatalogServices:
    """Build and register every lookup. Raises DatasetError when a dataset is missing or invalid."""
    services = load_services(config.data_dir, config.app)
    print(
        f"Loaded {services.specs.size} specs, {services.accessories.size} accessory groups, "
        f"{services.msrp.size} prices."
    )
    return init_services(services)


def format_response(response: SearchResponse) -> str:
    """Plain-text rendering of one response for the terminal."""
    if response.is_browse:
        return "Browse the Axis catalog: enter a competitor model, a legacy Axis model or a manufacturer."
    lines = [f"[{response.query_type}] confidence: {response.confidence} ({response.total} result(s))"]
    for r in response.results:
        score = "-" if r.score is None else str(r.score)
        line = f"  {r.source_model} ({r.manufacturer}) -> {r.axis_model}  score={score} tier={r.tier}"
        if r.url:
            line += f"  {r.url} [{r.url_confidence}]"
        lines.append(line)
    if response.suggestions:
        lines.append("  Did you mean: " + ", ".join(response.suggestions))
    return "\n".join(lines)


def run_query(services: CatalogServices, query: str) -> SearchResponse | None:
    """Validate and search one query; spoken-style input ("P thirty two sixty five") is normalized first."""
    check = validate_query(query)
    if not check.valid:
        print(check.reason)
        return None
    if " " in query.strip() and not any(c.isdigit() for c in query):
        spoken = normalize_voice(query)
        if any(c.isdigit() for c in spoken):
            query = spoken
    response = services.search.search(query)
    print(format_response(response))
    return response


def save_output(
    items: list[BatchItem],
    services: CatalogServices,
    output_dir: Path,
    *,
    source_stem: str | None = None,
) -> Path:
    """Write the batch workbook to output_dir; the name carries the input stem and a timestamp."""
    output_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    prefix = get_app_config().app.output_prefix
    name = f"{source_stem}_{prefix}_{stamp}.xlsx" if source_stem else f"{prefix}_{stamp}.xlsx"
    output_path = output_dir / name
    try:
        write_result_excel(items, output_path, services.msrp)
    except OSError as e:
        raise RuntimeError(f"Failed to write result file: {output_path}") from e
    return output_path


def process_file(input_path: Path, config: RunConfigSchema, services: CatalogServices) -> Path | None:
    """Read queries -> batch search -> pair mounts -> write results. Returns the workbook path or None."""
    batch_cfg = inject(BatchSettings)
    try:
        query_file = read_query_file(input_path, batch_cfg.max_batch_size)
    except RuntimeError as e:
        print(f"Failed to read {input_path}: {e}")
        return None
    rows = query_file.rows
    if not rows:
        print(f"No queries found in {input_path}")
        return None
    if query_file.dropped:
        print(
            f"{query_file.total} rows found, only the first {len(rows)} are processed: "
            f"{query_file.dropped} rows dropped."
        )

    items, _progress = run_batch_search(
        services.search,
        [q for q, _ in rows],
        mount_types=[m for _, m in rows],
        accessories=services.accessories,
        specs=services.specs,
        chunk_size=batch_cfg.chunk_size,
        show_progress=batch_cfg.show_progress,
    )
    low = sum(1 for it in items if it.response is None or it.response.confidence in ("low", "none"))
    print(f"Matched {len(items) - low} of {len(items)} queries ({low} low or no confidence, marked red).")

    try:
        out_path = save_output(items, services, config.output_dir, source_stem=input_path.stem)
    except RuntimeError as e:
        print(e)
        return None
    print(f"Written: {out_path}")
    return out_path


def _looks_like_file(text: str) -> bool:
    return text.lower().endswith(_SUPPORTED_FILES)


def _parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """args=None reads sys.argv; tests pass a list."""
    parser = argparse.ArgumentParser(
        description="Axis cross-reference: map competitor and legacy models to current Axis products.",
    )
    parser.add_argument(
        "input_file",
        nargs="?",
        default=None,
        help="Batch file (.txt, .csv or .xlsx); without it the tool starts interactively.",
    )
    parser.add_argument(
        "-q",
        "--query",
        action="append",
        default=[],
        help="Search one query and print the result; may be repeated.",
    )
    parser.add_argument(
        "--no-loop",
        action="store_true",
        help="Exit after the input file or queries instead of starting the interactive loop.",
    )
    return parser.parse_args(args)


def main(args: list[str] | None = None) -> None:
    """
    python main.py                       # interactive
    python main.py models.xlsx           # process the file, then continue interactively
    python main.py models.xlsx --no-loop # process the file and exit
    python main.py -q DS-2CD2143G2-I --no-loop
    """
    parsed = _parse_args(args)
    config = init_config()

    try:
        services = load_data(config)
    except DatasetError as e:
        print(f"Failed to load datasets, exiting: {e}")
        sys.exit(1)

    for query in parsed.query:
        run_query(services, query)

    pending: str | None = parsed.input_file.strip() if parsed.input_file else None
    if parsed.no_loop and (pending or parsed.query):
        if pending:
            path = normalize_input_path(pending)
            if path.exists():
                process_file(path, config, services)
            else:
                print(f"File not found: {path}")
        return

    print("Enter a model, a manufacturer or a batch file path; q to quit.\n")
    while True:
        text = pending if pending else input("> ").strip()
        pending = None
        if not text:
            continue
        if text.lower() in QUIT_WORDS:
            print("Bye.")
            break
        if _looks_like_file(text):
            path = normalize_input_path(text)
            if not path.exists():
                print(f"File not found: {path}\n")
                continue
            process_file(path, config, services)
            print()
            continue
        run_query(services, text)
        print()


if __name__ == "__main__":
    main()
