"""Division data analysis service: satellite CSV time series -> crop indicators."""

__version__ = "0.1.0"
