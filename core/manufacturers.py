"""Competitor manufacturer registry: known names, aliases, display capitalization, NDAA category tags."""

from __future__ import annotations

import re

from domain.catalog import CategoryId

# lowercase, matched against the whitespace-collapsed query
MANUFACTURERS: tuple[str, ...] = (
    # NDAA section 889
    "hikvision",
    "hik",
    "dahua",
    "dh",
    "uniview",
    "unv",
    # cloud
    "verkada",
    "rhombus",
    # korean
    "hanwha",
    "hanwha vision",
    "wisenet",
    "samsung",
    # japanese
    "i-pro",
    "ipro",
    "panasonic",
    # motorola solutions
    "avigilon",
    "pelco",
    # others
    "vivotek",
    "bosch",
    "sony",
    "canon",
    "honeywell",
    "arecont",
    "march networks",
    "2n",
)

MANUFACTURER_ALIASES: dict[str, str] = {
    "hik": "Hikvision",
    "dh": "Dahua",
    "unv": "Uniview",
    "ipro": "i-PRO",
    "wisenet": "Hanwha Vision",
    "samsung": "Hanwha Vision",
}

_SPECIAL_CAPITALIZATION: dict[str, str] = {
    "i-pro": "i-PRO",
    "ipro": "i-PRO",
    "2n": "2N",
}

CATEGORY_MAP: dict[str, CategoryId] = {
    "hikvision": "ndaa",
    "dahua": "ndaa",
    "uniview": "ndaa",
    "verkada": "cloud",
    "rhombus": "cloud",
    "hanwha vision": "korean",
    "hanwha": "korean",
    "samsung": "korean",
    "i-pro": "japanese",
    "panasonic": "japanese",
    "avigilon": "motorola",
    "pelco": "motorola",
    "vivotek": "taiwan",
    "bosch": "competitive",
    "sony": "competitive",
    "canon": "family",
    "2n": "family",
    "arecont vision": "defunct",
    "axis": "legacy-axis",
}

_WHITESPACE = re.compile(r"\s+")


def _fold(name: str) -> str:
    return _WHITESPACE.sub(" ", name.strip().lower())


def canonical_manufacturer(name: str) -> str:
    """Display form of a known name or alias: "hik" -> "Hikvision", "march networks" -> "March Networks"."""
    key = _fold(name)
    if key in MANUFACTURER_ALIASES:
        return MANUFACTURER_ALIASES[key]
    if key in _SPECIAL_CAPITALIZATION:
        return _SPECIAL_CAPITALIZATION[key]
    return " ".join(word[:1].upper() + word[1:] for word in re.split(r"[\s-]+", key) if word)


def get_category(manufacturer: str) -> CategoryId:
    """NDAA-style tag for a manufacturer; anything unlisted is "competitive"."""
    return CATEGORY_MAP.get(_fold(manufacturer), "competitive")
