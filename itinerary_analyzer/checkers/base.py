"""Base types for itinerary checkers."""

from __future__ import annotations

from typing import Optional, Protocol

from itinerary_analyzer.domain.models import DayView, Finding, Trip


class Checker(Protocol):
    """Single-responsibility check pass over the day snapshot view."""

    name: str

    def check(self, views: list[DayView], trip: Optional[Trip]) -> list[Finding]:
        ...


def last_day_number(views: list[DayView]) -> int:
    return max((view.day_number for view in views), default=0)


__all__ = ["Checker", "last_day_number"]
