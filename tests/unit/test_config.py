"""Tests for configuration module."""
import logging
from decimal import Decimal

import pytest
from asset_tracker.config import Config, get_config, load_config
from asset_tracker.models import Office
from asset_tracker.registry import DEFAULT_OFFICES
from asset_tracker.utils.errors import ConfigurationError


def test_config_load(temp_config_file):
    """Test basic config loading."""
    config = Config(temp_config_file)
    assert config.app_name == 'Test Tracker'
    assert config.app_version == '9.9.9'


def test_config_offices_and_rates(temp_config_file):
    config = Config(temp_config_file)
    assert config.offices == [Office('Berlin', 'EUR'), Office('London', 'GBP')]
    assert Decimal(config.rates['EUR']) == Decimal('0.92')


def test_config_tracker_settings(temp_config_file):
    config = Config(temp_config_file)
    assert config.lifespan_years == 2
    assert config.critical_days == 30
    assert config.warning_days == 60
    # Not in the file, so the defaults fill in
    assert config.date_formats == ['%m/%d/%Y', '%Y-%m-%d']


def test_config_get_nested(temp_config_file):
    """Test getting nested config values."""
    config = Config(temp_config_file)
    assert config.get('logging.level') == 'DEBUG'
    assert config.get('tracker.lifespan_years') == 2


def test_config_get_default(temp_config_file):
    """Test default values."""
    config = Config(temp_config_file)
    assert config.get('nonexistent.key', 'default') == 'default'


def test_config_missing_file():
    """Test error on missing config file."""
    with pytest.raises(ConfigurationError):
        Config('nonexistent.yaml')


def test_config_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('ASSET_TRACKER_ROOT', str(tmp_path))
    monkeypatch.delenv('ASSET_TRACKER_CONFIG', raising=False)
    config = Config()
    assert config.config_path is None
    assert [o.location for o in config.offices] == ['New York', 'London', 'Stockholm', 'Mumbai']
    assert config.lifespan_years == 3


def test_config_invalid_thresholds(tmp_path):
    path = tmp_path / 'bad.yaml'
    path.write_text('tracker:\n  critical_days: 200\n  warning_days: 100\n')
    with pytest.raises(ConfigurationError):
        Config(str(path))


def test_config_invalid_offices(tmp_path):
    path = tmp_path / 'bad.yaml'
    path.write_text('offices:\n  - location: Paris\n')
    with pytest.raises(ConfigurationError):
        Config(str(path))


def test_global_config(temp_config_file):
    with pytest.raises(ConfigurationError):
        get_config()
    loaded = load_config(temp_config_file)
    assert get_config() is loaded


@pytest.mark.parametrize(
    "body",
    [
        'offices:\n  - location: London\n    currency: POUND\n',
        'currency:\n  rates:\n    GBP: abc\n',
        'currency:\n  rates:\n    GBP: "-1"\n',
        'currency:\n  rates:\n    POUND: "0.74"\n',
        'tracker:\n  critical_days: abc\n',
        'tracker:\n  lifespan_years: [3]\n',
    ],
)
def test_config_invalid_values_raise_configuration_error(tmp_path, body):
    path = tmp_path / 'bad.yaml'
    path.write_text(body)
    with pytest.raises(ConfigurationError):
        Config(str(path))


def test_default_offices_come_from_registry(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv('ASSET_TRACKER_ROOT', str(tmp_path))
    monkeypatch.delenv('ASSET_TRACKER_CONFIG', raising=False)
    assert Config().offices == list(DEFAULT_OFFICES)


def test_log_level_argument_overrides_environment(temp_config_file, monkeypatch):
    monkeypatch.setenv('LOG_LEVEL', 'ERROR')
    Config(temp_config_file, log_level='INFO')
    assert logging.getLogger().level == logging.INFO
