"""Holdings charts: portfolio aggregation into chart series."""

__version__ = "0.1.0"
