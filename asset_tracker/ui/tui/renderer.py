from __future__ import annotations

"""Formatting helpers for the TUI."""

from datetime import date
from typing import Optional

from asset_tracker.currency import format_money
from asset_tracker.models import UrgencyTier

from .config import THEME


TIER_STYLES = {
    UrgencyTier.CRITICAL: THEME.error,
    UrgencyTier.WARNING: THEME.warning,
    UrgencyTier.NORMAL: "",
}


def format_currency(amount, currency: Optional[str]) -> str:
    return format_money(amount, currency or "USD")


def format_date(value: Optional[date]) -> str:
    if value is None:
        return "—"
    return value.strftime("%m/%d/%Y")


def get_style_for_tier(tier: UrgencyTier) -> str:
    return TIER_STYLES.get(tier, "")


def format_tier(tier: UrgencyTier) -> str:
    label = tier.value.capitalize()
    style = get_style_for_tier(tier)
    if not style:
        return label
    return f"[{style}]{label}[/]"
