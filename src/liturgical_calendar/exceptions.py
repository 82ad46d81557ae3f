"""Custom exception hierarchy for liturgical_calendar."""

from __future__ import annotations


class CalendarError(Exception):
    """Base exception for all liturgical_calendar errors."""


class InvalidDateError(CalendarError, ValueError):
    """A caller supplied an impossible calendar date (e.g. February 30)."""


class CelebrationDataError(CalendarError):
    """Malformed celebration table data, rejected at load time."""


class PrecedenceConflictError(CalendarError):
    """Two candidates tie for the top precedence level on the same day."""


class ConfigError(CalendarError):
    """Invalid regional configuration value."""
