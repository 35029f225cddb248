"""Malaysian Ringgit display formatting."""

from decimal import Decimal, ROUND_HALF_UP

CENT = Decimal("0.01")
CURRENCY_SYMBOL = "RM"


def to_ringgit(amount) -> Decimal:
    """Quantize an amount to whole sen (2 decimal places)."""
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_ringgit(amount) -> str:
    """
    Format an amount the way ms_MY currency formatting renders it.

    Examples:
        Decimal("20")      -> "RM20.00"
        Decimal("1234.5")  -> "RM1,234.50"
        Decimal("-5")      -> "-RM5.00"
    """
    value = to_ringgit(amount)
    sign = "-" if value < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(value):,.2f}"
