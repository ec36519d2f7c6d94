"""Multi-metric document similarity engine."""

__version__ = "0.3.0"
