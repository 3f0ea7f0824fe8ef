# src/kiwi/core/errors.py

from __future__ import annotations

from dataclasses import dataclass


class KiwiError(Exception):
    """Base class for errors raised inside the core."""


class DateTimeFormatError(KiwiError, ValueError):
    """A date/time token is not one of the accepted input forms."""


class TaskValidationError(KiwiError, ValueError):
    """A task would violate one of its invariants."""


class TaskIndexError(KiwiError, IndexError):
    """A 1-based task index is outside the list."""


class StorageError(KiwiError):
    """The data file could not be written."""


@dataclass(frozen=True, slots=True)
class UserError:
    """
    Parse failure returned (not raised) by the parser.

    `message` is ready for display.
    """

    message: str
