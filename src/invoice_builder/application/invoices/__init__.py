from invoice_builder.application.invoices.payment_settings import PaymentSettings
from invoice_builder.application.invoices.record_store import InvoiceRecordStore
from invoice_builder.application.invoices.session import InvoiceSession, SessionState

__all__ = ["InvoiceRecordStore", "InvoiceSession", "PaymentSettings", "SessionState"]
