from __future__ import annotations

from datetime import date, datetime, timezone
from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from invoice_builder.application.invoices.record_store import InvoiceRecordStore
from invoice_builder.application.invoices.session import InvoiceSession
from invoice_builder.domain.invoices.entities import InvoiceRecord, LineItem
from invoice_builder.infrastructure.data.in_memory_key_value_store import (
    InMemoryKeyValueStore,
)


TODAY = date(2025, 12, 15)


@pytest.fixture()
def memory_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture()
def record_store(memory_store: InMemoryKeyValueStore) -> InvoiceRecordStore:
    return InvoiceRecordStore(memory_store)


@pytest.fixture()
def session(record_store: InvoiceRecordStore) -> InvoiceSession:
    session = InvoiceSession(record_store)
    session.start_new(today=TODAY)
    return session


def make_record(invoice_id: str, *, items=None, client_name: str = "Acme", saved_at=None) -> InvoiceRecord:
    return InvoiceRecord(
        id=invoice_id,
        date=TODAY,
        client_name=client_name,
        client_address="1 Main Street",
        items=items if items is not None else [LineItem(name="Design", price=500, qty=1)],
        saved_at=saved_at or datetime(2025, 12, 15, 10, 0, tzinfo=timezone.utc),
    )
