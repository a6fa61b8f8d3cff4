"""Custom exception classes for the Asset Tracker."""


class AssetTrackerError(Exception):
    """Base exception for all Asset Tracker errors."""
    pass


class ConfigurationError(AssetTrackerError):
    """Raised when there's a configuration error."""
    pass


class ValidationError(AssetTrackerError):
    """Raised when user input cannot be parsed."""
    pass
