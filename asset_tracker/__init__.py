"""Interactive office asset tracker."""

__version__ = "0.1.0"
