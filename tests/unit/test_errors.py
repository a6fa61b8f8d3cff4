"""Tests for custom errors."""
from asset_tracker.utils.errors import (
    AssetTrackerError,
    ConfigurationError,
    ValidationError,
)


def test_error_hierarchy():
    """Test error inheritance."""
    assert issubclass(ConfigurationError, AssetTrackerError)
    assert issubclass(ValidationError, AssetTrackerError)
