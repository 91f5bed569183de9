from __future__ import annotations


class ReminderError(Exception):
    """Base class for reminder errors."""


class ValidationError(ReminderError, ValueError):
    """Raised when a reminder field would become empty."""


class ReminderIndexError(ReminderError, IndexError):
    """Raised when a 1-based position does not point at a reminder."""


class EmptyStateError(ReminderError, RuntimeError):
    """Raised when the collection's storage is missing."""
