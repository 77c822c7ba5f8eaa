from __future__ import annotations

from datetime import date, datetime, timezone

from invoice_builder.application.invoices.payment_settings import PaymentSettings
from invoice_builder.application.invoices.queries.list_history import ListInvoiceHistoryQuery
from invoice_builder.domain.invoices.entities import LineItem
from invoice_builder.presentation.controllers.invoice_controller import (
    OVERWRITE_PROMPT,
    InvoiceController,
)
from invoice_builder.presentation.viewmodels.invoice_viewmodel import (
    format_invoice_date,
    line_item_rows,
)

from conftest import make_record


def _controller(session, memory_store) -> InvoiceController:
    return InvoiceController(session, PaymentSettings(memory_store))


def test_preview_hides_blank_rows(session, memory_store) -> None:
    controller = _controller(session, memory_store)
    controller.add_item()
    controller.edit_item(1, "name", "Reel edit")
    preview = controller.edit_item(1, "price", "750")

    assert preview["rows"] == [
        {"name": "Reel edit", "price": "750 Rs", "qty": "1", "total": "750 Rs"},
    ]
    assert preview["total"] == "750 Rs"
    assert preview["date"] == "15/12/2025"
    assert preview["qr_payload"] == "upi://pay?pa=brandlift@upi&pn=Brandlift&am=750"


def test_line_item_rows_keep_named_zero_price_items() -> None:
    rows = line_item_rows([LineItem(name="Free consult", price=0, qty=1), LineItem()])

    assert [row["name"] for row in rows] == ["Free consult"]


def test_upi_id_is_persisted(session, memory_store) -> None:
    controller = _controller(session, memory_store)

    assert controller.set_upi_id(" shop@okaxis ") is True

    assert PaymentSettings(memory_store).upi_id == "shop@okaxis"
    assert controller.preview()["qr_payload"].startswith("upi://pay?pa=shop@okaxis&")


def test_custom_qr_suppresses_payload(session, memory_store) -> None:
    controller = _controller(session, memory_store)

    controller.set_custom_qr(True)
    assert controller.preview()["qr_payload"] is None
    controller.set_custom_qr(False)
    assert controller.preview()["qr_payload"] is not None


def test_save_messages(session, memory_store) -> None:
    controller = _controller(session, memory_store)
    prompts: list[str] = []

    assert controller.save() == {"ok": True, "status": "CREATED", "message": "Invoice Saved!"}

    outcome = controller.save(ask=lambda prompt: prompts.append(prompt) or False)
    assert outcome["status"] == "DECLINED"
    assert prompts == [OVERWRITE_PROMPT]

    assert controller.save(ask=lambda prompt: True)["status"] == "OVERWRITTEN"

    controller.update_header(invoice_id="")
    assert controller.save()["message"] == "Please enter an Invoice ID"


def test_update_header_ignores_bad_date(session, memory_store) -> None:
    controller = _controller(session, memory_store)

    controller.update_header(invoice_date="2026-03-01", client_name="Studio K")
    preview = controller.update_header(invoice_date="not a date")

    assert session.current_date == date(2026, 3, 1)
    assert preview["client_name"] == "Studio K"


def test_history_rows_newest_first(session, memory_store, record_store) -> None:
    record_store.save(
        make_record("BL-25-12-01", saved_at=datetime(2025, 12, 1, tzinfo=timezone.utc)),
    )
    record_store.save(
        make_record("BL-25-12-02", client_name="", saved_at=datetime(2025, 12, 5, tzinfo=timezone.utc)),
    )
    controller = _controller(session, memory_store)

    rows = controller.history()

    assert [row["id"] for row in rows] == ["BL-25-12-02", "BL-25-12-01"]
    assert rows[0]["client"] == "Unknown Client"
    assert rows[1]["total"] == "₹500"
    assert rows[1]["date"] == "15/12/2025"


def test_history_query_entries(record_store) -> None:
    record_store.save(make_record("BL-25-12-01"))

    entries = ListInvoiceHistoryQuery(record_store).execute()

    assert [(entry.id, entry.total) for entry in entries] == [("BL-25-12-01", 500.0)]


def test_load_and_new_invoice(session, memory_store, record_store) -> None:
    record_store.save(make_record("BL-25-12-04"))
    controller = _controller(session, memory_store)

    assert controller.load("BL-25-12-04") is True
    assert controller.preview()["invoice_id"] == "BL-25-12-04"
    assert controller.load("missing") is False

    preview = controller.new_invoice()
    assert preview["client_name"] == ""
    assert preview["invoice_id"].endswith("-05")


def test_format_invoice_date_blank() -> None:
    assert format_invoice_date(None) == ""


def test_cleared_date_and_untrimmed_id(session, memory_store) -> None:
    controller = _controller(session, memory_store)

    preview = controller.update_header(invoice_id=" BL-25-12-03 ", invoice_date="")

    assert preview["invoice_id"] == " BL-25-12-03 "
    assert preview["date"] == ""
    assert session.current_date is None
