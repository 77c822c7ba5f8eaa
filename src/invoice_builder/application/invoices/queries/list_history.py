from __future__ import annotations

from invoice_builder.application.contracts.invoice_dtos import InvoiceHistoryEntry
from invoice_builder.application.invoices.record_store import InvoiceRecordStore


class ListInvoiceHistoryQuery:
    def __init__(self, record_store: InvoiceRecordStore) -> None:
        self.record_store = record_store

    def execute(self) -> list[InvoiceHistoryEntry]:
        records = sorted(self.record_store.list_all(), key=lambda record: record.saved_at.timestamp(), reverse=True)
        return [
            InvoiceHistoryEntry(
                id=record.id,
                client_name=record.client_name,
                date=record.date,
                total=record.total,
                saved_at=record.saved_at,
            )
            for record in records
        ]
