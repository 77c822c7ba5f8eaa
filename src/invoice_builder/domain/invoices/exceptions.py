from __future__ import annotations


class InvoiceError(Exception):
    """Base class for invoice builder failures."""


class InvoiceValidationError(InvoiceError, ValueError):
    """User input is missing or invalid, e.g. saving without an invoice id."""


class StorageDeniedError(InvoiceError, RuntimeError):
    """The persistent store rejected a write."""


class LineItemIndexError(InvoiceError, IndexError):
    """A line item index outside the ledger bounds."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Line item index {index} out of range for {size} item(s)")
        self.index = index
        self.size = size
