"""Pure report logic: ordering, lifespan tiers and converted prices.

Nothing here prints; presentation lives in ``asset_tracker.ui.tui.display``.
"""
from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional

from asset_tracker.currency import CurrencyConverter
from asset_tracker.models import Asset, ReportRow, UrgencyTier

LIFESPAN_YEARS = 3
CRITICAL_DAYS = 90
WARNING_DAYS = 180


def add_years(d: date, years: int) -> date:
    """Shift a date by whole years; Feb 29 becomes Feb 28 in non-leap years.

    Results past the supported calendar range clamp to date.max / date.min.
    """
    year = d.year + years
    if year > date.max.year:
        return date.max
    if year < date.min.year:
        return date.min
    try:
        return d.replace(year=year)
    except ValueError:
        return d.replace(year=year, day=28)


def remaining_lifespan_days(
    purchase_date: date,
    today: Optional[date] = None,
    lifespan_years: int = LIFESPAN_YEARS,
) -> int:
    today = today or date.today()
    return (add_years(purchase_date, lifespan_years) - today).days


def tier_for_remaining(
    remaining_days: int,
    critical_days: int = CRITICAL_DAYS,
    warning_days: int = WARNING_DAYS,
) -> UrgencyTier:
    if remaining_days < critical_days:
        return UrgencyTier.CRITICAL
    if remaining_days < warning_days:
        return UrgencyTier.WARNING
    return UrgencyTier.NORMAL


def urgency_tier(
    purchase_date: date,
    today: Optional[date] = None,
    lifespan_years: int = LIFESPAN_YEARS,
    critical_days: int = CRITICAL_DAYS,
    warning_days: int = WARNING_DAYS,
) -> UrgencyTier:
    """Classify an asset by how much of its lifespan is left."""
    remaining = remaining_lifespan_days(purchase_date, today, lifespan_years)
    return tier_for_remaining(remaining, critical_days, warning_days)


def sort_assets(assets: Iterable[Asset]) -> List[Asset]:
    """Order by office location, then purchase date; ties keep insertion order."""
    return sorted(assets, key=lambda a: (a.office_location, a.purchase_date))


def build_report(
    assets: Iterable[Asset],
    converter: Optional[CurrencyConverter] = None,
    today: Optional[date] = None,
    lifespan_years: int = LIFESPAN_YEARS,
    critical_days: int = CRITICAL_DAYS,
    warning_days: int = WARNING_DAYS,
) -> List[ReportRow]:
    """Build the sorted report rows for a collection of assets."""
    converter = converter or CurrencyConverter()
    today = today or date.today()

    rows: List[ReportRow] = []
    for asset in sort_assets(assets):
        remaining = remaining_lifespan_days(asset.purchase_date, today, lifespan_years)
        rows.append(
            ReportRow(
                asset=asset,
                local_price=converter.convert(asset.price_usd, asset.currency),
                remaining_days=remaining,
                tier=tier_for_remaining(remaining, critical_days, warning_days),
            )
        )
    return rows
