# core/errors.py
"""
Structured error types for the holdings charts.

Aggregation itself is closed-world arithmetic and does not fail; errors
only come from turning raw payloads into portfolio models.
"""

from dataclasses import dataclass, field as dataclass_field
from datetime import datetime
from enum import Enum
from typing import Optional


class ErrorPhase(Enum):
    """Phase where error occurred."""
    LOADING = "LOADING"
    AGGREGATION = "AGGREGATION"
    ENCODING = "ENCODING"
    RENDERING = "RENDERING"


@dataclass
class ChartIssue:
    """Structured description of a rejected input record."""
    phase: ErrorPhase
    item: str  # record kind and index, e.g. "positions[3]"
    message: str
    field: Optional[str] = None
    timestamp: str = dataclass_field(default_factory=lambda: datetime.now().isoformat())

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "phase": self.phase.value,
            "item": self.item,
            "field": self.field,
            "message": self.message,
            "timestamp": self.timestamp,
        }


class HoldingsChartsError(Exception):
    """Base error for this package."""

    def __init__(self, message: str, phase: ErrorPhase = ErrorPhase.AGGREGATION):
        super().__init__(message)
        self.phase = phase


class PortfolioLoadError(HoldingsChartsError):
    """A position or account record could not be converted."""

    def __init__(self, message: str, issue: Optional[ChartIssue] = None):
        super().__init__(message, phase=ErrorPhase.LOADING)
        self.issue = issue
