"""Invoice builder core: line items, totals, invoice numbering and saved history."""

__version__ = "0.1.0"
