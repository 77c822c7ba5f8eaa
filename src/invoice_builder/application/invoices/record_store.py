"""
Invoice history kept as one JSON array in a key-value store.

Entries are validated one at a time. An entry that does not fit the record
schema is hidden from listings but kept in storage untouched, and its id still
counts for collision checks and numbering.
"""
from __future__ import annotations

import logging
import threading
import weakref
from typing import Any, List, Optional, Tuple

from pydantic import TypeAdapter, ValidationError

from invoice_builder.application.contracts.invoice_dtos import SaveResult, SaveStatus
from invoice_builder.domain.invoices.entities import InvoiceRecord
from invoice_builder.domain.invoices.exceptions import StorageDeniedError
from invoice_builder.domain.repositories.key_value_store import PersistentStore


logger = logging.getLogger(__name__)

INVOICES_KEY = "brandlift_invoices"

_ENTRIES = TypeAdapter(List[Any])

_locks_guard = threading.Lock()
_store_locks: "weakref.WeakKeyDictionary[object, threading.Lock]" = weakref.WeakKeyDictionary()


def _lock_for(store: PersistentStore) -> threading.Lock:
    with _locks_guard:
        lock = _store_locks.get(store)
        if lock is None:
            lock = threading.Lock()
            _store_locks[store] = lock
        return lock


def _entry_id(entry: Any) -> Optional[str]:
    if isinstance(entry, dict) and isinstance(entry.get("id"), str):
        return entry["id"]
    return None


class InvoiceRecordStore:
    def __init__(self, store: PersistentStore, key: str = INVOICES_KEY) -> None:
        self.store = store
        self.key = key

    def _read_entries(self) -> Tuple[List[Any], bool]:
        """Raw stored entries, and whether the stored value could be read as an array."""
        raw = self.store.get(self.key)
        if not raw:
            return [], True
        try:
            return _ENTRIES.validate_json(raw), True
        except ValidationError:
            logger.warning("invoice_store.unreadable_history key=%s", self.key, exc_info=True)
            return [], False

    def _parse(self, entry: Any) -> Optional[InvoiceRecord]:
        try:
            return InvoiceRecord.model_validate(entry)
        except ValidationError:
            logger.warning("invoice_store.skipped_entry id=%s", _entry_id(entry), exc_info=True)
            return None

    def list_all(self) -> List[InvoiceRecord]:
        """Return every readable record; unreadable data reads as no history."""
        entries, _ = self._read_entries()
        return [record for record in map(self._parse, entries) if record is not None]

    def ids(self) -> List[str]:
        entries, _ = self._read_entries()
        return [invoice_id for invoice_id in map(_entry_id, entries) if invoice_id is not None]

    def find_by_id(self, invoice_id: str) -> Optional[InvoiceRecord]:
        for record in self.list_all():
            if record.id == invoice_id:
                return record
        return None

    def save(self, record: InvoiceRecord, overwrite: bool = False) -> SaveResult:
        with _lock_for(self.store):
            entries, readable = self._read_entries()
            if not readable:
                logger.warning("invoice_store.save_refused_unreadable id=%s", record.id)
                return SaveResult(
                    SaveStatus.STORAGE_DENIED,
                    record=record,
                    error=StorageDeniedError(
                        "Cannot save data: stored invoice history is unreadable."
                    ),
                )

            existing_index = next(
                (index for index, entry in enumerate(entries) if _entry_id(entry) == record.id),
                None,
            )
            if existing_index is not None and not overwrite:
                logger.info("invoice_store.save_declined id=%s", record.id)
                return SaveResult(SaveStatus.DECLINED, record=record)

            serialized = record.model_dump(mode="json", by_alias=True)
            if existing_index is None:
                entries.append(serialized)
                status = SaveStatus.CREATED
            else:
                entries[existing_index] = serialized
                status = SaveStatus.OVERWRITTEN

            payload = _ENTRIES.dump_json(entries).decode("utf-8")
            if not self.store.set(self.key, payload):
                logger.warning("invoice_store.save_denied id=%s", record.id)
                return SaveResult(
                    SaveStatus.STORAGE_DENIED,
                    record=record,
                    error=StorageDeniedError("Cannot save data: storage is not writable."),
                )

        logger.info("invoice_store.saved id=%s status=%s", record.id, status.value)
        return SaveResult(status, record=record)
