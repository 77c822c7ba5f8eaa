import datetime as dt
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LineItem(BaseModel):
    # Edits are clamped to >= 0 by the ledger; stored history may hold anything finite.
    name: str = ""
    price: float = 0.0
    qty: float = 1.0

    @property
    def line_total(self) -> float:
        return self.price * self.qty


class InvoiceRecord(BaseModel):
    """Saved snapshot of one invoice.

    Serialized with the camelCase field names used by the stored history
    (``clientName``, ``clientAddress``, ``savedAt``). A cleared date may be stored
    as an empty string; it reads back as ``None`` and is written as ``null``.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    date: Optional[dt.date] = None
    client_name: str = Field(default="", alias="clientName")
    client_address: str = Field(default="", alias="clientAddress")
    items: List[LineItem] = Field(default_factory=list)
    saved_at: dt.datetime = Field(alias="savedAt")

    @field_validator("date", mode="before")
    @classmethod
    def _blank_date_is_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @property
    def total(self) -> float:
        return sum(item.line_total for item in self.items)
