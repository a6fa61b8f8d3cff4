from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class UrgencyTier(Enum):
    """How close an asset is to the end of its useful life."""

    CRITICAL = "critical"
    WARNING = "warning"
    NORMAL = "normal"


@dataclass(frozen=True)
class Office:
    """An office location and the currency it reports prices in."""

    location: str
    currency: str


@dataclass(frozen=True)
class Asset:
    """A single tracked asset.

    ``currency`` is taken from the office registry when the asset is recorded
    and is not updated if the office's currency changes later.
    """

    type: str
    brand: str
    model: str
    price_usd: Decimal
    purchase_date: date
    office_location: str
    currency: str = "USD"


@dataclass(frozen=True)
class ReportRow:
    """One line of the asset report."""

    asset: Asset
    local_price: Decimal
    remaining_days: int
    tier: UrgencyTier
