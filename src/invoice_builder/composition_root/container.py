from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from invoice_builder.application.invoices.payment_settings import PaymentSettings
from invoice_builder.application.invoices.queries.list_history import ListInvoiceHistoryQuery
from invoice_builder.application.invoices.record_store import InvoiceRecordStore
from invoice_builder.application.invoices.session import InvoiceSession
from invoice_builder.domain.repositories.key_value_store import PersistentStore
from invoice_builder.env import load_env
from invoice_builder.infrastructure.data.in_memory_key_value_store import InMemoryKeyValueStore
from invoice_builder.infrastructure.data.sql_key_value_store import SqlKeyValueStore
from invoice_builder.logging_setup import setup_logging
from invoice_builder.presentation.controllers.invoice_controller import InvoiceController
from invoice_builder.settings import Settings


@dataclass(frozen=True)
class AppContainer:
    settings: Settings
    store: PersistentStore
    record_store: InvoiceRecordStore
    payment_settings: PaymentSettings
    session: InvoiceSession
    history_query: ListInvoiceHistoryQuery
    controller: InvoiceController


def _build_store(settings: Settings) -> PersistentStore:
    if settings.store_kind == "memory":
        return InMemoryKeyValueStore()
    return SqlKeyValueStore.from_url(settings.db_url)


def create_app_container(
    settings: Optional[Settings] = None,
    *,
    store: Optional[PersistentStore] = None,
    configure_logging: bool = True,
) -> AppContainer:
    if settings is None:
        load_env()
        settings = Settings.from_env()
    if configure_logging:
        setup_logging(settings)

    store = store if store is not None else _build_store(settings)
    record_store = InvoiceRecordStore(store)
    payment_settings = PaymentSettings(store)
    session = InvoiceSession(record_store)
    session.start_new()
    history_query = ListInvoiceHistoryQuery(record_store)

    return AppContainer(
        settings=settings,
        store=store,
        record_store=record_store,
        payment_settings=payment_settings,
        session=session,
        history_query=history_query,
        controller=InvoiceController(session, payment_settings, history_query),
    )
