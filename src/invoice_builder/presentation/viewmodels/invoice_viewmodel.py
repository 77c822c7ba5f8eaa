from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from typing import Optional

from invoice_builder.application.contracts.invoice_dtos import InvoiceHistoryEntry
from invoice_builder.domain.invoices.entities import LineItem
from invoice_builder.domain.invoices.payments import format_amount


UNKNOWN_CLIENT = "Unknown Client"


def format_money(value: float) -> str:
    return f"{format_amount(value)} Rs"


def format_invoice_date(value: Optional[date]) -> str:
    if not value:
        return ""
    return value.strftime("%d/%m/%Y")


def is_visible(item: LineItem) -> bool:
    # Blank rows stay editable but are left out of the preview.
    return bool(item.name) or item.price > 0


def line_item_to_viewmodel(item: LineItem) -> dict[str, str]:
    return {
        "name": item.name,
        "price": format_money(item.price),
        "qty": format_amount(item.qty),
        "total": format_money(item.line_total),
    }


def line_item_rows(items: Iterable[LineItem]) -> list[dict[str, str]]:
    return [line_item_to_viewmodel(item) for item in items if is_visible(item)]


def history_entry_to_viewmodel(entry: InvoiceHistoryEntry) -> dict[str, str]:
    return {
        "id": entry.id,
        "client": entry.client_name or UNKNOWN_CLIENT,
        "date": format_invoice_date(entry.date),
        "total": f"₹{format_amount(entry.total)}",
    }


def history_rows(entries: Iterable[InvoiceHistoryEntry]) -> list[dict[str, str]]:
    return [history_entry_to_viewmodel(entry) for entry in entries]
