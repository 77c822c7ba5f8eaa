from __future__ import annotations

import logging
from datetime import date
from typing import Any, Callable, Optional

from invoice_builder.application.contracts.invoice_dtos import SaveStatus
from invoice_builder.application.invoices.payment_settings import PaymentSettings
from invoice_builder.application.invoices.queries.list_history import ListInvoiceHistoryQuery
from invoice_builder.application.invoices.session import InvoiceSession
from invoice_builder.presentation.viewmodels.invoice_viewmodel import (
    format_invoice_date,
    format_money,
    history_rows,
    line_item_rows,
)


logger = logging.getLogger(__name__)

OVERWRITE_PROMPT = "Invoice ID exists. Overwrite?"

_SAVE_MESSAGES = {
    SaveStatus.CREATED: "Invoice Saved!",
    SaveStatus.OVERWRITTEN: "Invoice Saved!",
    SaveStatus.DECLINED: "",
    SaveStatus.VALIDATION_FAILED: "Please enter an Invoice ID",
    SaveStatus.STORAGE_DENIED: (
        "Warning: Cannot save data (storage is blocked). "
        "Check that the data directory is writable."
    ),
}


class InvoiceController:
    """Turns raw UI events into session calls and returns plain dicts to draw."""

    def __init__(
        self,
        session: InvoiceSession,
        payment_settings: PaymentSettings,
        history_query: Optional[ListInvoiceHistoryQuery] = None,
    ) -> None:
        self.session = session
        self.payment_settings = payment_settings
        self.history_query = history_query or ListInvoiceHistoryQuery(session.record_store)

    def add_item(self) -> dict[str, Any]:
        self.session.add_item()
        return self.preview()

    def remove_item(self, index: int) -> dict[str, Any]:
        self.session.remove_item(int(index))
        return self.preview()

    def edit_item(self, index: int, field: str, raw_value: Any) -> dict[str, Any]:
        self.session.set_item_field(int(index), field, raw_value)
        return self.preview()

    def update_header(
        self,
        *,
        invoice_id: Optional[str] = None,
        invoice_date: Optional[str] = None,
        client_name: Optional[str] = None,
        client_address: Optional[str] = None,
    ) -> dict[str, Any]:
        if invoice_id is not None:
            self.session.current_id = invoice_id
        if invoice_date is not None:
            try:
                self.session.current_date = date.fromisoformat(invoice_date) if invoice_date else None
            except ValueError:
                logger.debug("invoice.header.bad_date value=%r", invoice_date)
        if client_name is not None:
            self.session.client_name = client_name
        if client_address is not None:
            self.session.client_address = client_address
        return self.preview()

    def set_upi_id(self, value: str) -> bool:
        saved = self.payment_settings.set_upi_id(value)
        self.session.totals_changed.emit(self.session.total())
        return saved

    def set_custom_qr(self, uploaded: bool) -> None:
        if uploaded:
            self.session.use_custom_qr()
        else:
            self.session.clear_custom_qr()

    def save(self, ask: Optional[Callable[[str], bool]] = None) -> dict[str, Any]:
        def confirm(_invoice_id: str) -> bool:
            return bool(ask and ask(OVERWRITE_PROMPT))

        result = self.session.save(confirm_overwrite=confirm)
        return {
            "ok": result.ok,
            "status": result.status.value,
            "message": _SAVE_MESSAGES[result.status],
        }

    def new_invoice(self) -> dict[str, Any]:
        self.session.start_new()
        return self.preview()

    def load(self, invoice_id: str) -> bool:
        return self.session.load_by_id(invoice_id) is not None

    def history(self) -> list[dict[str, str]]:
        return history_rows(self.history_query.execute())

    def preview(self) -> dict[str, Any]:
        session = self.session
        return {
            "invoice_id": session.current_id,
            "date": format_invoice_date(session.current_date),
            "client_name": session.client_name,
            "client_address": session.client_address,
            "rows": line_item_rows(session.ledger.items),
            "total": format_money(session.total()),
            "qr_payload": session.qr_payload(self.payment_settings.upi_id),
        }
