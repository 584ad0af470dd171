"""
Utility module for freqsignal.

Contains text helpers used by charting and settings code.
"""

from .formatting import (
    format_frequency,
    expand_metric_frequency,
    format_db,
)

__all__ = [
    "format_frequency",
    "expand_metric_frequency",
    "format_db",
]
