"""
Services module - Computation layer.

Modules:
- analytics: Training log and assessment statistics
"""
from coach_analytics.services.analytics import SummaryCalculator

__all__ = [
    "SummaryCalculator",
]
