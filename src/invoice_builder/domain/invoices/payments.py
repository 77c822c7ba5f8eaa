from __future__ import annotations


PAYEE_NAME = "Brandlift"
DEFAULT_UPI_ID = "brandlift@upi"


def format_amount(amount: float) -> str:
    value = float(amount or 0)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def payment_payload(upi_id: str, amount: float) -> str:
    """UPI deep link encoded into the invoice QR code."""
    pa = (upi_id or "").strip() or DEFAULT_UPI_ID
    return f"upi://pay?pa={pa}&pn={PAYEE_NAME}&am={format_amount(amount)}"
