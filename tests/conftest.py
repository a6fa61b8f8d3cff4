"""Pytest configuration and fixtures."""
import io
from datetime import date
from decimal import Decimal

import pytest
from pathlib import Path
import tempfile
import yaml
from rich.console import Console

from asset_tracker.config import reset_config
from asset_tracker.models import Asset


@pytest.fixture
def temp_config_file():
    """Create a temporary config file for testing."""
    config_data = {
        'app': {
            'name': 'Test Tracker',
            'version': '9.9.9',
        },
        'offices': [
            {'location': 'Berlin', 'currency': 'EUR'},
            {'location': 'London', 'currency': 'GBP'},
        ],
        'currency': {
            'rates': {'EUR': '0.92', 'GBP': '0.74'},
        },
        'tracker': {
            'lifespan_years': 2,
            'critical_days': 30,
            'warning_days': 60,
        },
        'logging': {
            'level': 'DEBUG',
            'format': 'text'
        }
    }

    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False) as f:
        yaml.dump(config_data, f)
        config_path = f.name

    yield config_path

    Path(config_path).unlink()


@pytest.fixture
def console():
    """A wide, colourless console writing to memory."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def make_asset():
    def _make(office="London", purchased=date(2024, 1, 15), price="1000", currency="GBP", **kw):
        return Asset(
            type=kw.get("type", "Laptop"),
            brand=kw.get("brand", "Dell"),
            model=kw.get("model", "XPS 13"),
            price_usd=Decimal(price),
            purchase_date=purchased,
            office_location=office,
            currency=currency,
        )
    return _make


@pytest.fixture(autouse=True)
def clear_config():
    """Reset the global config before each test."""
    reset_config()
    yield
    reset_config()
