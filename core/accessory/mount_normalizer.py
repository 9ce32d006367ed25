"""Free-text mount descriptions from integrator spreadsheets -> PlacementType."""

from __future__ import annotations

from core.utils.similarity import levenshtein_distance
from domain.catalog import PlacementType

MAX_MOUNT_TYPE_DISTANCE = 2

MOUNT_TYPE_MAP: dict[str, PlacementType] = {
    # pole
    "pole": "pole",
    "pole mount": "pole",
    "pole mounted": "pole",
    "light pole": "pole",
    "street pole": "pole",
    # wall
    "wall": "wall",
    "wall mount": "wall",
    "wall mounted": "wall",
    "exterior wall": "wall",
    "interior wall": "wall",
    # ceiling
    "ceiling": "ceiling",
    "ceiling mount": "ceiling",
    "ceiling mounted": "ceiling",
    "drop ceiling": "ceiling",
    "hard ceiling": "ceiling",
    "hard lid": "ceiling",
    "t bar": "ceiling",
    "tile ceiling": "ceiling",
    # recessed
    "recessed": "recessed",
    "ceiling recessed": "recessed",
    "recessed ceiling": "recessed",
    "in ceiling": "recessed",
    # flush
    "flush": "flush",
    "flush mount": "flush",
    "flush mounted": "flush",
    # pendant
    "pendant": "pendant",
    "pendant mount": "pendant",
    "pendant drop": "pendant",
    "drop mount": "pendant",
    "hanging": "pendant",
    "hanging mount": "pendant",
    "suspended": "pendant",
    # corner
    "corner": "corner",
    "corner mount": "corner",
    "corner bracket": "corner",
    # parapet
    "parapet": "parapet",
    "parapet mount": "parapet",
    "roof edge": "parapet",
    "rooftop": "parapet",
}


def _closest_mount_type(text: str) -> PlacementType | None:
    # first key in table order wins on equal distance
    best_key, best_dist = None, MAX_MOUNT_TYPE_DISTANCE + 1
    for key in MOUNT_TYPE_MAP:
        dist = levenshtein_distance(text, key)
        if dist < best_dist:
            best_key, best_dist = key, dist
    return MOUNT_TYPE_MAP[best_key] if best_key is not None else None


def normalize_mount_type(text: str | None) -> PlacementType | None:
    """
    "Pole Mount", "pole-mount", "POLE MOUNTED" -> "pole"; "ceilling" -> "ceiling".
    Returns None for anything unrecognizable so the caller can flag the row.
    """
    if not text or not text.strip():
        return None
    normalized = text.strip().lower().replace("-", " ").replace("_", " ")
    exact = MOUNT_TYPE_MAP.get(normalized)
    if exact:
        return exact
    return _closest_mount_type(normalized)
