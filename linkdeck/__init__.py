"""Keep a prioritised, tagged collection of links and open them in a chosen browser."""

__version__ = "0.1.0"
__all__ = ["browser", "errors", "link", "validate", "inputs", "filters", "forms", "cli"]