"""
Invoice session: the one invoice currently being edited.

Holds the editable header fields and the line item ledger, and coordinates the
new / save / load transitions against the record store. Presentation code
subscribes to ``totals_changed`` and ``history_changed`` instead of being
called by the session directly.
"""
from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Callable, Optional, Union

from invoice_builder.application.contracts.invoice_dtos import SaveResult, SaveStatus
from invoice_builder.application.invoices.record_store import InvoiceRecordStore
from invoice_builder.application.invoices.signals import Signal
from invoice_builder.domain.invoices.entities import InvoiceRecord, LineItem
from invoice_builder.domain.invoices.exceptions import InvoiceValidationError
from invoice_builder.domain.invoices.ledger import LineItemLedger
from invoice_builder.domain.invoices.numbering import InvoiceIdGenerator
from invoice_builder.domain.invoices.payments import payment_payload


logger = logging.getLogger(__name__)

OverwriteConfirmation = Union[bool, Callable[[str], bool]]


class SessionState(str, Enum):
    EDITING = "EDITING"
    SAVING = "SAVING"


class InvoiceSession:
    def __init__(
        self,
        record_store: InvoiceRecordStore,
        id_generator: Optional[InvoiceIdGenerator] = None,
    ) -> None:
        self.record_store = record_store
        self.id_generator = id_generator or InvoiceIdGenerator()
        self.ledger = LineItemLedger([LineItem()])
        self.current_id = ""
        self.current_date: Optional[date] = date.today()
        self.client_name = ""
        self.client_address = ""
        self.custom_qr = False
        self.state = SessionState.EDITING
        self.totals_changed = Signal("totals_changed")
        self.history_changed = Signal("history_changed")

    # ── Derived values ──

    def total(self) -> float:
        return self.ledger.total()

    def qr_payload(self, upi_id: str) -> Optional[str]:
        """Payment payload for the current total, or None while a custom QR image is shown."""
        if self.custom_qr:
            return None
        return payment_payload(upi_id, self.total())

    # ── Item edits ──

    def add_item(self) -> None:
        self.ledger.add()
        self._notify_totals()

    def remove_item(self, index: int) -> None:
        self.ledger.remove_at(index)
        self._notify_totals()

    def set_item_field(self, index: int, field: str, raw_value: Any) -> None:
        self.ledger.set_field(index, field, raw_value)
        self._notify_totals()

    # ── Custom QR override ──

    def use_custom_qr(self) -> None:
        self.custom_qr = True

    def clear_custom_qr(self) -> None:
        self.custom_qr = False
        self._notify_totals()

    # ── Transitions ──

    def next_invoice_id(self, today: Optional[date] = None) -> str:
        return self.id_generator.next(self.record_store.ids(), today or date.today())

    def start_new(self, today: Optional[date] = None) -> None:
        today = today or date.today()
        self.client_name = ""
        self.client_address = ""
        self.current_date = today
        self.ledger.replace([LineItem()])
        self.current_id = self.next_invoice_id(today)
        self.custom_qr = False
        logger.info("invoice.session.new id=%s", self.current_id)
        self._notify_totals()

    def build_record(self, now: Optional[datetime] = None) -> InvoiceRecord:
        return InvoiceRecord(
            id=self.current_id,
            date=self.current_date,
            client_name=self.client_name,
            client_address=self.client_address,
            items=self.ledger.snapshot(),
            saved_at=now or datetime.now(timezone.utc),
        )

    def save(
        self,
        confirm_overwrite: OverwriteConfirmation = False,
        now: Optional[datetime] = None,
    ) -> SaveResult:
        if not self.current_id:
            logger.warning("invoice.save.missing_id")
            return SaveResult(
                SaveStatus.VALIDATION_FAILED,
                error=InvoiceValidationError("missing id"),
            )

        self.state = SessionState.SAVING
        try:
            record = self.build_record(now)
            overwrite = self._resolve_overwrite(record.id, confirm_overwrite)
            result = self.record_store.save(record, overwrite=overwrite)
        finally:
            self.state = SessionState.EDITING

        if result.ok:
            self.history_changed.emit()
        return result

    def load(self, record: InvoiceRecord) -> None:
        self.current_id = record.id
        self.current_date = record.date
        self.client_name = record.client_name
        self.client_address = record.client_address
        self.ledger.replace(record.items)
        self.custom_qr = False
        logger.info("invoice.session.loaded id=%s", record.id)
        self._notify_totals()

    def load_by_id(self, invoice_id: str) -> Optional[InvoiceRecord]:
        record = self.record_store.find_by_id(invoice_id)
        if record is not None:
            self.load(record)
        return record

    def _resolve_overwrite(self, invoice_id: str, confirm_overwrite: OverwriteConfirmation) -> bool:
        if not callable(confirm_overwrite):
            return bool(confirm_overwrite)
        if self.record_store.find_by_id(invoice_id) is None:
            return False
        return bool(confirm_overwrite(invoice_id))

    def _notify_totals(self) -> None:
        self.totals_changed.emit(self.total())
