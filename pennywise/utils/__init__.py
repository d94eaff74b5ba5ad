"""Mini README: Utility helpers for Pennywise.

Currently exports the month filter parsing helpers shared by the projector
and the application state.
"""

from .months import normalise_month, parse_month

__all__ = ["normalise_month", "parse_month"]
