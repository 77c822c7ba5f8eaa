from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional

from invoice_builder.domain.invoices.entities import InvoiceRecord
from invoice_builder.domain.invoices.exceptions import InvoiceError


class SaveStatus(str, Enum):
    CREATED = "CREATED"
    OVERWRITTEN = "OVERWRITTEN"
    DECLINED = "DECLINED"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    STORAGE_DENIED = "STORAGE_DENIED"


@dataclass(frozen=True)
class SaveResult:
    status: SaveStatus
    record: Optional[InvoiceRecord] = None
    error: Optional[InvoiceError] = None

    @property
    def ok(self) -> bool:
        return self.status in (SaveStatus.CREATED, SaveStatus.OVERWRITTEN)


@dataclass(frozen=True)
class InvoiceHistoryEntry:
    id: str
    client_name: str
    date: Optional[date]
    total: float
    saved_at: datetime
