"""Fixed-rate currency conversion and money formatting.

Rates are multipliers applied to a USD amount. They are constants, never
fetched; unknown currency codes convert 1:1 (treated as USD).
"""
from __future__ import annotations

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Mapping, Optional, Union

logger = logging.getLogger(__name__)

Number = Union[Decimal, int, float, str]

CENT = Decimal("0.01")

DEFAULT_RATES: Dict[str, Decimal] = {
    "USD": Decimal("1.00"),
    "GBP": Decimal("0.74"),
    "SEK": Decimal("8.53"),
    "INR": Decimal("74.52"),
}

FALLBACK_RATE = Decimal("1.00")

# (symbol, symbol goes before the amount)
CURRENCY_SYMBOLS: Dict[str, tuple] = {
    "USD": ("$", True),
    "GBP": ("£", True),
    "EUR": ("€", True),
    "INR": ("₹", True),
    "JPY": ("¥", True),
    "SEK": ("kr", False),
    "NOK": ("kr", False),
    "DKK": ("kr", False),
}


def _to_decimal(amount: Number) -> Decimal:
    if isinstance(amount, Decimal):
        return amount
    # str() keeps floats like 0.1 from dragging in binary noise
    return Decimal(str(amount))


class CurrencyConverter:
    """Converts USD amounts using an explicit code-to-rate table."""

    def __init__(self, rates: Optional[Mapping[str, Number]] = None) -> None:
        source = DEFAULT_RATES if rates is None else rates
        self.rates: Dict[str, Decimal] = {
            code.upper(): _to_decimal(rate) for code, rate in source.items()
        }

    def rate_for(self, currency: str) -> Decimal:
        rate = self.rates.get((currency or "").upper())
        if rate is None:
            logger.debug("No rate for %r, using identity conversion", currency)
            return FALLBACK_RATE
        return rate

    def convert(self, amount_usd: Number, currency: str) -> Decimal:
        """Convert a USD amount into ``currency``, rounded to cents."""
        value = _to_decimal(amount_usd) * self.rate_for(currency)
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


_default_converter = CurrencyConverter()


def convert(amount_usd: Number, currency: str) -> Decimal:
    """Convert with the built-in rate table."""
    return _default_converter.convert(amount_usd, currency)


def format_money(amount: Optional[Number], currency: str) -> str:
    """Format an amount with the currency's own symbol, e.g. $1,234.00 or 853.00 kr."""
    if amount is None:
        return "—"
    value = _to_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)
    code = (currency or "").upper()
    sign = "-" if value < 0 else ""
    digits = f"{abs(value):,.2f}"
    symbol = CURRENCY_SYMBOLS.get(code)
    if symbol is None:
        return f"{sign}{digits} {code}".rstrip()
    text, prefix = symbol
    if prefix:
        return f"{sign}{text}{digits}"
    return f"{sign}{digits} {text}"
