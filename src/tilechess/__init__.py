"""tilechess - a two-player chess rule engine with a text tile-map format."""

__version__ = "0.1.0"
