# src/kiwi/core/clock.py

"""Clocks for time-only date inputs. All dates are naive local."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


class SystemClock:
    """Local wall clock."""

    def today(self) -> date:
        return date.today()


@dataclass(frozen=True, slots=True)
class FixedClock:
    """Clock pinned to one day (tests, replays)."""

    day: date

    def today(self) -> date:
        return self.day
