"""Amount parsing and display utilities."""

from decimal import Decimal, InvalidOperation
import re

CURRENCY_SYMBOLS = r"[$€£¥₱]"


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "-123.45"
    - "1,234.56"
    - "(123.45)" (negative in parentheses)

    The sign is kept; rejecting non-positive amounts is the ledger's job.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

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

    amount_str = re.sub(CURRENCY_SYMBOLS, "", amount_str)
    amount_str = amount_str.replace(",", "").strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    return -amount if is_negative else amount


def format_amount(amount: Decimal | None, currency: str = "$") -> str:
    """Format an amount for display.

    Negative amounts are shown with a leading minus before the symbol;
    None renders as an empty string.

    Examples:
        format_amount(Decimal("1234.5")) -> "$1,234.50"
        format_amount(Decimal("-20")) -> "-$20.00"
    """
    if amount is None:
        return ""
    sign = "-" if amount < 0 else ""
    return f"{sign}{currency}{abs(amount):,.2f}"
