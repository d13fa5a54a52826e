"""Currency formatting for display."""

from decimal import Decimal, ROUND_HALF_UP


def format_gbp(amount: Decimal | int | float) -> str:
    """Format an amount as pounds sterling.

    Examples:
        >>> format_gbp(Decimal("1234.5"))
        '£1,234.50'
        >>> format_gbp(Decimal("-12"))
        '-£12.00'
    """
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    return f"{sign}£{abs(value):,.2f}"
