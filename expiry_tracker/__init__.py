"""Product expiry tracker."""

__version__ = "1.0.0"
