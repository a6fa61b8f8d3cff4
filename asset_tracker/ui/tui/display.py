from __future__ import annotations

"""Rich display components for the TUI."""

from typing import List, Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from asset_tracker.models import Office, ReportRow

from .config import BOX, NO_ASSETS_TEXT, REPORT_TITLE, THEME, WELCOME_TEXT
from .renderer import format_currency, format_date, format_tier, get_style_for_tier


REPORT_COLUMNS = (
    "Type",
    "Brand",
    "Model",
    "Office Location",
    "Price (USD)",
    "Price (Local Currency)",
    "Purchase Date",
)


def create_welcome_panel() -> Panel:
    return Panel(WELCOME_TEXT, title="Welcome", border_style=THEME.primary, box=getattr(box, BOX.welcome))


def create_asset_table(rows: Sequence[ReportRow], show_status: bool = False) -> Table:
    """Report table, one row per asset, styled by urgency tier.

    ``show_status`` adds a text column naming the tier, for output where
    colour is not available.
    """
    table = Table(title=REPORT_TITLE, box=getattr(box, BOX.table), header_style=f"{THEME.primary} bold")
    for name in REPORT_COLUMNS:
        numeric = name.startswith("Price") or name == "Purchase Date"
        table.add_column(name, justify="right" if name.startswith("Price") else "left", no_wrap=numeric)
    if show_status:
        table.add_column("Status", no_wrap=True)

    for row in rows:
        asset = row.asset
        cells: List[str] = [
            asset.type,
            asset.brand,
            asset.model,
            asset.office_location,
            format_currency(asset.price_usd, "USD"),
            format_currency(row.local_price, asset.currency),
            format_date(asset.purchase_date),
        ]
        if show_status:
            cells.append(format_tier(row.tier))
        table.add_row(*cells, style=get_style_for_tier(row.tier) or None)
    return table


def create_office_table(offices: Sequence[Office]) -> Table:
    table = Table(title="Offices", box=box.SIMPLE)
    table.add_column("Location", style=f"{THEME.primary} bold")
    table.add_column("Currency", style=THEME.neutral)
    for office in offices:
        table.add_row(office.location, office.currency)
    return table


def create_rates_table(rates) -> Table:
    table = Table(title="Conversion Rates (per 1 USD)", box=box.SIMPLE)
    table.add_column("Currency", style=f"{THEME.primary} bold")
    table.add_column("Rate", justify="right", style=THEME.neutral)
    for code, rate in rates.items():
        table.add_row(code, f"{rate:.2f}")
    return table


def render_report(console: Console, rows: Sequence[ReportRow]) -> None:
    """Print the report, or the empty notice when there is nothing to show."""
    if not rows:
        console.print(NO_ASSETS_TEXT)
        return
    show_status = console.color_system is None
    console.print()
    console.print(create_asset_table(rows, show_status=show_status))
