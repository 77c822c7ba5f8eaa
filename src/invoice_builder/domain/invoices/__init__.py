from invoice_builder.domain.invoices.entities import InvoiceRecord, LineItem
from invoice_builder.domain.invoices.exceptions import (
    InvoiceError,
    InvoiceValidationError,
    LineItemIndexError,
    StorageDeniedError,
)
from invoice_builder.domain.invoices.ledger import LineItemLedger
from invoice_builder.domain.invoices.numbering import DEFAULT_INVOICE_ID, InvoiceIdGenerator
from invoice_builder.domain.invoices.payments import payment_payload

__all__ = [
    "DEFAULT_INVOICE_ID",
    "InvoiceError",
    "InvoiceIdGenerator",
    "InvoiceRecord",
    "InvoiceValidationError",
    "LineItem",
    "LineItemIndexError",
    "LineItemLedger",
    "StorageDeniedError",
    "payment_payload",
]
