from __future__ import annotations

import re
from datetime import date
from typing import Iterable


ID_PREFIX = "BL"
ID_DELIMITER = "-"
DEFAULT_INVOICE_ID = "BL-25-12-01"

_LEADING_INT = re.compile(r"^\s*[+-]?\d+")


def _suffix_number(invoice_id: str) -> int | None:
    suffix = str(invoice_id).split(ID_DELIMITER)[-1]
    match = _LEADING_INT.match(suffix)
    if not match:
        return None
    return int(match.group(0))


class InvoiceIdGenerator:
    """Builds ``BL-YY-MM-NN`` ids from the highest suffix already in use.

    The counter is global: the month and year of existing ids are ignored, so
    the first invoice of a new month continues from the last suffix ever used.
    """

    def __init__(self, prefix: str = ID_PREFIX, default_id: str = DEFAULT_INVOICE_ID) -> None:
        self.prefix = prefix
        self.default_id = default_id

    def next(self, existing_ids: Iterable[str], now: date) -> str:
        existing = [invoice_id for invoice_id in existing_ids if invoice_id is not None]
        if not existing:
            return self.default_id

        parsed = [num for num in (_suffix_number(i) for i in existing) if num is not None]
        next_num = max([0, *parsed]) + 1
        return ID_DELIMITER.join(
            [self.prefix, f"{now.year % 100:02d}", f"{now.month:02d}", f"{next_num:02d}"]
        )
