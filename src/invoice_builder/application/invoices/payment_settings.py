from __future__ import annotations

from invoice_builder.domain.repositories.key_value_store import PersistentStore


UPI_ID_KEY = "brandlift_upi_id"


class PaymentSettings:
    """UPI id remembered between sessions."""

    def __init__(self, store: PersistentStore, key: str = UPI_ID_KEY) -> None:
        self.store = store
        self.key = key

    @property
    def upi_id(self) -> str:
        return self.store.get(self.key) or ""

    def set_upi_id(self, value: str) -> bool:
        return self.store.set(self.key, (value or "").strip())
