"""Aggregation core: pure transformations from portfolio records to chart data."""
