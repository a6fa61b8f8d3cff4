"""Input parsing for prices and purchase dates.

Both grammars are fixed and independent of the host locale:

* price: optional leading ``$``, optional ``,`` thousands separators and a
  plain decimal number, e.g. ``1499``, ``1,499.99`` or ``$1,499.99``.
* date: the first matching ``strptime`` format from a list, by default
  ``MM/dd/yyyy`` and ISO ``yyyy-mm-dd``.
"""
import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Iterable, Sequence

from asset_tracker.utils.errors import ValidationError


DEFAULT_DATE_FORMATS: Sequence[str] = ("%m/%d/%Y", "%Y-%m-%d")

_PRICE_RE = re.compile(r"^\$?\s*(\d{1,3}(,\d{3})+|\d+)?(\.\d+)?$")


def parse_price(text: str) -> Decimal:
    """
    Parse a non-negative price in dollars.

    Args:
        text: Raw user input

    Returns:
        The price as a Decimal

    Raises:
        ValidationError: If the text is not a number or is negative
    """
    raw = (text or "").strip()
    if raw.startswith("-"):
        raise ValidationError(f"Price must not be negative, got: {raw}")

    match = _PRICE_RE.match(raw)
    if not match or not (match.group(1) or match.group(3)):
        raise ValidationError(f"Invalid price: {raw!r}")

    cleaned = raw.lstrip("$").strip().replace(",", "")
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        raise ValidationError(f"Invalid price: {raw!r}")

    if not value.is_finite() or value < 0:
        raise ValidationError(f"Invalid price: {raw!r}")
    return value


def parse_date(text: str, formats: Iterable[str] = DEFAULT_DATE_FORMATS) -> date:
    """
    Parse a calendar date using the first format that matches.

    Raises:
        ValidationError: If no format matches
    """
    raw = (text or "").strip()
    for fmt in formats:
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
    raise ValidationError(f"Invalid date: {raw!r}")


def validate_currency_code(code: str) -> str:
    """Validate a three-letter currency code and return it upper-cased."""
    code = (code or "").strip().upper()
    if len(code) != 3 or not code.isalpha():
        raise ValidationError(f"Invalid currency code: {code!r}")
    return code
