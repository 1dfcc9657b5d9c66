"""Weather forecasts for saved places, with place search and unit settings."""

__version__ = "0.1.0"