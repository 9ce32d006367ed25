"""List-price lookup. Exact key, then base model; a miss is "TBD", never an estimate."""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Mapping

from domain.catalog import MsrpEntry
from models.schemas import MSRPResult

from .cascade import ModelIndex

logger = logging.getLogger(__name__)

UNKNOWN_PRICE = "TBD"


def format_price(price: float | None) -> str:
    """Whole US dollars with thousands separators: 1299 -> "$1,299"; None -> "TBD"."""
    if price is None:
        return UNKNOWN_PRICE
    dollars = Decimal(str(price)).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"${int(dollars):,}"


class MSRPLookup:
    def __init__(self, entries: Mapping[str, MsrpEntry]) -> None:
        priced = {model: entry for model, entry in entries.items() if entry.msrp is not None}
        self._index: ModelIndex[MsrpEntry] = ModelIndex(priced, name="msrp")
        logger.info("MSRP index built: %d priced models", len(self._index))

    @property
    def size(self) -> int:
        return len(self._index)

    def lookup(self, model: str) -> MSRPResult:
        hit = self._index.lookup(model)
        if hit is None:
            return MSRPResult()
        return MSRPResult(
            price=hit.value.msrp,
            match_type="direct" if hit.step == "exact" else "base-model",
            matched_model=hit.key,
            formatted=format_price(hit.value.msrp),
        )

    def get_price(self, model: str) -> float | None:
        return self.lookup(model).price

    def has_price(self, model: str) -> bool:
        return self.get_price(model) is not None

    def get_description(self, model: str) -> str:
        hit = self._index.lookup(model)
        return hit.value.description if hit else ""

    format_price = staticmethod(format_price)

    def calculate_total(self, items: Iterable[tuple[str, int]]) -> tuple[float, int]:
        """Sum price * quantity over (model, quantity) pairs; unpriced quantities are counted, not guessed."""
        total = 0.0
        unknown_count = 0
        for model, quantity in items:
            price = self.get_price(model)
            if price is None:
                unknown_count += quantity
            else:
                total += price * quantity
        return total, unknown_count
