from invoice_builder.presentation.controllers.invoice_controller import InvoiceController

__all__ = ["InvoiceController"]
