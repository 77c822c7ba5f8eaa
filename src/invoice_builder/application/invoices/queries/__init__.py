from invoice_builder.application.invoices.queries.list_history import ListInvoiceHistoryQuery

__all__ = ["ListInvoiceHistoryQuery"]
