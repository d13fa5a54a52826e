"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles "12.50", "£12.50", "1,234.56" and the accounting style
    "(12.50)" for negatives. Sign is kept; whether a negative amount is
    acceptable is for the domain to decide.

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    amount_str = re.sub(r"[£$€\s,]", "", amount_str)

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return -amount if is_negative else amount
