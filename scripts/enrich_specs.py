#!/usr/bin/env python3
"""
Fill gaps in the Axis spec dataset from an updates file, without overwriting existing values.

The updates file is JSON: {model: {field: value, ...}, ...}; field names may be
snake_case or the dataset's camelCase. The result is written to a new file.

Usage (from the project root):
  python scripts/enrich_specs.py data/axis_specs.json scraped_updates.json
  python scripts/enrich_specs.py data/axis_specs.json updates.json -o data/axis_specs.enriched.json
  python scripts/enrich_specs.py data/axis_specs.json updates.json --no-infer
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

# project root (one level above this script)
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core.enrichment import fill_spec_gaps  # noqa: E402
from core.errors import DatasetError  # noqa: E402
from core.loaders import load_specs  # noqa: E402

logger = logging.getLogger("enrich_specs")


def _parse_args(args: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fill missing Axis spec fields from an updates file.")
    parser.add_argument("snapshot", type=Path, help="Spec dataset JSON")
    parser.add_argument("updates", type=Path, help="Updates JSON: {model: {field: value}}")
    parser.add_argument("-o", "--output", type=Path, default=None, help="Output file (default: <snapshot>.enriched.json)")
    parser.add_argument("--no-infer", action="store_true", help="Do not infer missing camera types")
    return parser.parse_args(args)


def main(args: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    parsed = _parse_args(args)
    try:
        snapshot = load_specs(parsed.snapshot)
    except DatasetError as e:
        print(e)
        return 1
    try:
        updates = json.loads(parsed.updates.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print(f"Cannot read updates {parsed.updates}: {e}")
        return 1
    if not isinstance(updates, dict):
        print(f"Updates file must hold a JSON object: {parsed.updates}")
        return 1

    enriched, report = fill_spec_gaps(snapshot, updates, infer_types=not parsed.no_infer)
    output = parsed.output or parsed.snapshot.with_suffix(".enriched.json")
    # unset defaults stay out of the file so a later run still treats them as gaps
    data = enriched.model_dump(mode="json", by_alias=True, exclude_unset=True)
    output.write_text(
        json.dumps(data, indent=2, ensure_ascii=False) + "\n",
        encoding="utf-8",
    )
    print(f"Updated models: {len(report.updated_models)}, fields filled: {report.filled_fields}")
    print(f"Existing values kept: {report.skipped_existing}, camera types inferred: {len(report.inferred_camera_types)}")
    if report.unknown_models:
        print(f"Unknown models ({len(report.unknown_models)}): {', '.join(report.unknown_models[:20])}")
    print(f"Written: {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
