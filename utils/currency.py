import math

from utils.errors import ValidationError


def format_currency(amount: float, symbol: str = "$") -> str:
    """Format a float as currency string, e.g. '$1,234.56'."""
    return f"{symbol}{amount:,.2f}"


def parse_amount(value) -> float:
    """Coerce form input ('12.50', 12.5, ...) to a positive finite float.

    Raises ValidationError for anything else.
    """
    if isinstance(value, bool) or value is None:
        raise ValidationError("Amount must be a number.")
    try:
        amount = float(value.strip() if isinstance(value, str) else value)
    except (TypeError, ValueError):
        raise ValidationError("Amount must be a number.") from None
    if not math.isfinite(amount):
        raise ValidationError("Amount must be a number.")
    if amount <= 0:
        raise ValidationError("Amount must be greater than zero.")
    return amount
