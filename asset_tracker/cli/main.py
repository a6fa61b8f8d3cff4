from __future__ import annotations

from datetime import date, datetime
from typing import Optional

import typer
from rich.console import Console

from asset_tracker.config import Config
from asset_tracker.currency import CurrencyConverter
from asset_tracker.registry import OfficeRegistry
from asset_tracker.ui.tui.app import AssetTrackerTUI
from asset_tracker.ui.tui.display import create_office_table, create_rates_table
from asset_tracker.utils.errors import ConfigurationError


app = typer.Typer(add_completion=False, help="Office asset tracker")


def _load(config_path: Optional[str], log_level: Optional[str] = None) -> Config:
    try:
        return Config(config_path, log_level=log_level)
    except ConfigurationError as e:
        typer.secho(f"Configuration error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _parse_as_of(value: Optional[str]) -> Optional[date]:
    if value is None:
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        raise typer.BadParameter("expected YYYY-MM-DD", param_hint="--as-of")


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Run an interactive session when no command is given."""
    if ctx.invoked_subcommand is None:
        run(config=None, as_of=None, log_level=None)


@app.command("run")
def run(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
    as_of: Optional[str] = typer.Option(None, "--as-of", help="Report date (YYYY-MM-DD), defaults to today"),
    log_level: Optional[str] = typer.Option(None, "--log-level", "-l", help="Logging level, e.g. DEBUG"),
):
    """Enter assets interactively, then print the sorted report."""
    today = _parse_as_of(as_of)
    cfg = _load(config, log_level)
    AssetTrackerTUI(config=cfg, console=Console(), today=today).run()


@app.command("offices")
def offices(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
):
    """List the configured offices and their currencies."""
    cfg = _load(config)
    Console().print(create_office_table(OfficeRegistry.from_config(cfg).offices()))


@app.command("rates")
def rates(
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to config.yaml"),
):
    """Show the fixed conversion rates."""
    cfg = _load(config)
    Console().print(create_rates_table(CurrencyConverter(cfg.rates).rates))


if __name__ == "__main__":
    app()
