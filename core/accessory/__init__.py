"""Accessory compatibility: lookup cascade, mount-type normalization, batch mount pairing."""

from .lookup import (
    FORM_FACTOR_DEFAULTS,
    RECOMMENDATION_PRIORITY,
    AccessoryLookup,
    get_form_factor_defaults,
    mounts_for_placement,
    rank_mounts,
)
from .mount_normalizer import MOUNT_TYPE_MAP, normalize_mount_type
from .mount_pairer import pair_mounts_for_batch, resolve_mount_pair_with_confidence

__all__ = [
    "AccessoryLookup",
    "FORM_FACTOR_DEFAULTS",
    "MOUNT_TYPE_MAP",
    "RECOMMENDATION_PRIORITY",
    "get_form_factor_defaults",
    "mounts_for_placement",
    "normalize_mount_type",
    "pair_mounts_for_batch",
    "rank_mounts",
    "resolve_mount_pair_with_confidence",
]
