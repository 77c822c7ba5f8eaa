from __future__ import annotations

import logging
import math
import re
from typing import Any, Iterable, List, Tuple

from invoice_builder.domain.invoices.entities import LineItem
from invoice_builder.domain.invoices.exceptions import LineItemIndexError


logger = logging.getLogger(__name__)

EDITABLE_FIELDS = ("name", "price", "qty")

# Leading numeric prefix, same acceptance as a browser parseFloat.
_NUMBER_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_amount(raw_value: Any) -> float:
    """Parse a price or quantity permissively; anything unusable becomes 0."""
    if isinstance(raw_value, bool):
        return 0.0
    if isinstance(raw_value, (int, float)):
        value = float(raw_value)
    else:
        match = _NUMBER_PREFIX.match(str(raw_value or ""))
        if not match:
            logger.debug("ledger.parse_degraded raw=%r", raw_value)
            return 0.0
        value = float(match.group(1))
    if not math.isfinite(value) or value < 0:
        logger.debug("ledger.parse_degraded raw=%r", raw_value)
        return 0.0
    return value


class LineItemLedger:
    """Mutable working set of line items for the invoice being edited."""

    def __init__(self, items: Iterable[LineItem] | None = None) -> None:
        self._items: List[LineItem] = []
        if items:
            self.replace(items)

    def __len__(self) -> int:
        return len(self._items)

    @property
    def items(self) -> Tuple[LineItem, ...]:
        return tuple(self._items)

    def add(self) -> None:
        self._items.append(LineItem())

    def remove_at(self, index: int) -> None:
        self._check_index(index)
        del self._items[index]

    def set_field(self, index: int, field: str, raw_value: Any) -> None:
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown line item field '{field}'")
        self._check_index(index)
        item = self._items[index]
        if field == "name":
            item.name = "" if raw_value is None else str(raw_value)
        else:
            setattr(item, field, parse_amount(raw_value))

    def line_total(self, index: int) -> float:
        self._check_index(index)
        return self._items[index].line_total

    def total(self) -> float:
        return sum(item.price * item.qty for item in self._items)

    def snapshot(self) -> List[LineItem]:
        return [item.model_copy(deep=True) for item in self._items]

    def replace(self, items: Iterable[LineItem]) -> None:
        self._items = [LineItem.model_validate(item).model_copy(deep=True) for item in items]

    def _check_index(self, index: int) -> None:
        if not isinstance(index, int) or isinstance(index, bool) or not 0 <= index < len(self._items):
            raise LineItemIndexError(index, len(self._items))
