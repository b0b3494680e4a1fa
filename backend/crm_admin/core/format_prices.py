"""Price Formatting — display strings for prices and amounts on the admin pages.

Invariants:
    - All functions are PURE and never raise for odd input
    - Rounding is half-up on Decimal values (no binary float artifacts: 2.675 -> "2.68")
    - bool, NaN and infinities are not numbers; neither is anything beyond float range
      (more than MAX_INTEGER_DIGITS integer digits)
    - Numeric strings are parsed by their leading numeric prefix ("12abc" -> 12)
    - Non-finite floats display as "NaN" / "Infinity" / "-Infinity"

Design Decisions:
    - format_price/format_currency keep the storefront contract: None -> placeholder text,
      non-numeric values passed through as text
    - format_usd is the dashboard contract: anything unusable renders as "$0.00"
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext

from crm_admin.config import get_settings

MAX_INTEGER_DIGITS = 309

_CENTS = Decimal("0.01")
_NUMERIC_PREFIX = re.compile(r"^\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_THOUSANDS = re.compile(r"\B(?=(\d{3})+(?!\d))")


def to_amount(value: object) -> Decimal | None:
    """Parse value into a Decimal rounded to cents, or None if it isn't numeric."""
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, Decimal)):
        amount = Decimal(value)
    elif isinstance(value, float):
        amount = Decimal(repr(value))
    elif isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value)
        if not match:
            return None
        amount = Decimal(match.group().strip())
    else:
        return None
    if not amount.is_finite() or amount.adjusted() >= MAX_INTEGER_DIGITS:
        return None
    with localcontext() as ctx:
        # enough digits for every integer digit plus the cents
        ctx.prec = max(28, amount.adjusted() + 4)
        return amount.quantize(_CENTS, rounding=ROUND_HALF_UP)


def _as_text(value: object) -> str:
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    return str(value)


def format_price(price: object, default: str | None = None) -> str:
    """12.5 -> "12.50"; None -> placeholder text; "n/a" -> "n/a"."""
    if price is None:
        return default if default is not None else get_settings().price_unavailable_text
    amount = to_amount(price)
    if amount is None:
        return _as_text(price)
    return format(amount, "f")


def format_currency(price: object, currency: str | None = None) -> str:
    symbol = currency if currency is not None else get_settings().currency_symbol
    return f"{symbol}{format_price(price)}"


def format_number(value: object) -> str:
    """format_price output with thousands separators: 1234567.891 -> "1,234,567.89"."""
    parts = format_price(value).split(".")
    parts[0] = _THOUSANDS.sub(",", parts[0])
    return ".".join(parts)


def format_usd(amount: object) -> str:
    """1234.5 -> "$1,234.50"; -3 -> "-$3.00"; None/garbage -> "$0.00"."""
    value = to_amount(amount)
    if value is None:
        return "$0.00"
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"
