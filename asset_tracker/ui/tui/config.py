from __future__ import annotations

"""TUI configuration and style constants."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Theme:
    primary: str = "cyan"
    success: str = "green"
    warning: str = "yellow"
    error: str = "red"
    info: str = "blue"
    neutral: str = "white"


@dataclass(frozen=True)
class BoxStyles:
    welcome: str = "DOUBLE"
    table: str = "HEAVY_HEAD"


THEME = Theme()
BOX = BoxStyles()

QUIT_SENTINEL = "q"

WELCOME_TEXT = (
    """
[bold cyan]Asset Tracker[/bold cyan]
Enter asset details (type 'q' to quit):
    """
    .strip()
)

NO_ASSETS_TEXT = "No assets added yet."
REPORT_TITLE = "List of Assets"

INVALID_PRICE_TEXT = "Invalid input. Please enter a valid price."
INVALID_DATE_TEXT = "Invalid date format. Please enter a valid date (MM/dd/yyyy)."
