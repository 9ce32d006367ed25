"""
Model key normalization shared by every lookup.

- normalize_model_key: canonical, comparable key (uppercase, no AXIS prefix, hyphens for spaces).
- get_base_model_key: key with regional/electrical/frequency/optical/packaging variants stripped.
- extract_series_prefix: leading letters + first two digits, the last-resort fallback bucket.
"""

from __future__ import annotations

import re

# Fixed stripping order; every pass walks this tuple front to back.
MODEL_VARIANT_SUFFIXES: tuple[str, ...] = (
    "-60HZ",
    "-50HZ",
    "-EUR",
    "-US",
    "-BR",
    "-NM",
    "-AR",
    "-24V",
    "-M12",
    "-BULK",
)

_AXIS_PREFIX = re.compile(r"^(?:AXIS[\s-]*)+")
_WHITESPACE = re.compile(r"\s+")
_LENS_PATTERN = re.compile(r"-\d+MM$")
_SERIES_PATTERN = re.compile(r"^([A-Z]+)(\d{2})")


def normalize_model_key(model: str) -> str:
    """
    Canonical ModelKey: uppercase, leading AXIS token(s) removed, whitespace runs -> "-".
    Never fails; the empty string maps to itself.
    """
    key = model.strip().upper()
    key = _AXIS_PREFIX.sub("", key).strip()
    return _WHITESPACE.sub("-", key)


def _strip_variant_once(key: str) -> str:
    key = key.rstrip("-")
    for suffix in MODEL_VARIANT_SUFFIXES:
        if key.endswith(suffix):
            key = key[: -len(suffix)]
    key = _LENS_PATTERN.sub("", key)
    return key.rstrip("-")


def get_base_model_key(model: str) -> str:
    """
    BaseModelKey: normalize, then strip variant suffixes, lens sizes and trailing hyphens
    until a full pass changes nothing. "P3265-LVE-60HZ-EUR" -> "P3265-LVE".
    """
    base = normalize_model_key(model)
    while True:
        stripped = _strip_variant_once(base)
        if stripped == base:
            return base
        base = stripped


def extract_series_prefix(model: str) -> str | None:
    """Series prefix: "P3285-LVE" -> "P32", "M4215-LV" -> "M42"; None when the key has no such shape."""
    m = _SERIES_PATTERN.match(normalize_model_key(model))
    return f"{m.group(1)}{m.group(2)}" if m else None
