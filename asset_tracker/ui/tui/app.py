from __future__ import annotations

import uuid
from datetime import date
from decimal import Decimal
from typing import List, Optional, TextIO

from rich.console import Console

from asset_tracker.config import Config
from asset_tracker.currency import CurrencyConverter
from asset_tracker.models import Asset, ReportRow
from asset_tracker.registry import OfficeRegistry
from asset_tracker.report import build_report
from asset_tracker.store import AssetStore
from asset_tracker.utils.logging import get_logger
from asset_tracker.utils.validation import DEFAULT_DATE_FORMATS

from .config import QUIT_SENTINEL
from .display import create_welcome_panel, render_report
from .input_handler import get_date, get_price, get_user_input


class AssetTrackerTUI:
    """Terminal User Interface for the Asset Tracker."""

    def __init__(
        self,
        config: Optional[Config] = None,
        console: Optional[Console] = None,
        stream: Optional[TextIO] = None,
        today: Optional[date] = None,
    ) -> None:
        self.config = config
        self.console = console or Console()
        self.stream = stream
        self.today = today
        self.session_id = uuid.uuid4().hex
        self.logger = get_logger(__name__, session_id=self.session_id)

        if config is not None:
            self.registry = OfficeRegistry.from_config(config)
            self.converter = CurrencyConverter(config.rates)
            self.date_formats = config.date_formats
        else:
            self.registry = OfficeRegistry.with_defaults()
            self.converter = CurrencyConverter()
            self.date_formats = list(DEFAULT_DATE_FORMATS)
        self.store = AssetStore()

    def run(self) -> List[ReportRow]:
        """Main entry point: collect assets, then print the report."""
        self.console.print(create_welcome_panel())
        try:
            self.collect_assets()
        except KeyboardInterrupt:
            self.console.print("\n[yellow]Interrupted.[/]")
            self.logger.info("Input interrupted after %d assets", len(self.store))
        return self.show_report()

    def collect_assets(self) -> int:
        """Read assets until the quit sentinel or end of input.

        Returns the number of assets added in this call.
        """
        added = 0
        while True:
            try:
                asset = self._read_asset()
            except EOFError:
                self.logger.warning("Input ended; discarding any partially entered asset")
                break
            if asset is None:
                break
            self.store.add(asset)
            added += 1
            self.logger.debug("Added %s %s for %s (%s)", asset.brand, asset.model, asset.office_location, asset.currency)
        return added

    def _read_asset(self) -> Optional[Asset]:
        asset_type = self._ask("Enter asset type")
        if asset_type.strip().lower() == QUIT_SENTINEL:
            return None

        brand = self._ask("Enter asset brand")
        model = self._ask("Enter asset model")
        price = get_price("Enter asset price in dollars", console=self.console, stream=self.stream)
        purchase_date = get_date(
            "Enter purchase date (MM/dd/yyyy)",
            console=self.console,
            stream=self.stream,
            formats=self.date_formats,
        )
        office_location = self._ask("Enter office location")

        return self.create_asset(asset_type, brand, model, price, purchase_date, office_location)

    def _ask(self, prompt: str) -> str:
        return get_user_input(prompt, console=self.console, stream=self.stream)

    def create_asset(
        self,
        asset_type: str,
        brand: str,
        model: str,
        price_usd: Decimal,
        purchase_date: date,
        office_location: str,
    ) -> Asset:
        """Build an asset with its currency taken from the office registry."""
        return Asset(
            type=asset_type,
            brand=brand,
            model=model,
            price_usd=price_usd,
            purchase_date=purchase_date,
            office_location=office_location,
            currency=self.registry.currency_for(office_location),
        )

    def add_asset(self, *args, **kwargs) -> Asset:
        asset = self.create_asset(*args, **kwargs)
        self.store.add(asset)
        return asset

    def build_rows(self) -> List[ReportRow]:
        if self.config is None:
            return build_report(self.store, self.converter, today=self.today)
        return build_report(
            self.store,
            self.converter,
            today=self.today,
            lifespan_years=self.config.lifespan_years,
            critical_days=self.config.critical_days,
            warning_days=self.config.warning_days,
        )

    def show_report(self) -> List[ReportRow]:
        rows = self.build_rows()
        render_report(self.console, rows)
        return rows


def main() -> None:
    app = AssetTrackerTUI(config=Config())
    app.run()


if __name__ == "__main__":  # pragma: no cover
    main()
