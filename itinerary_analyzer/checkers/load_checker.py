"""Timing/load checker: overloaded days and crowded flight days."""

from __future__ import annotations

from typing import Optional

from itinerary_analyzer.domain.constants import FLIGHT_DAY_MAX_ACTIVITIES, MAX_DAY_HOURS
from itinerary_analyzer.domain.enums import ActivityType, FindingKind, Priority
from itinerary_analyzer.domain.models import DayView, Finding, Trip


def day_minutes(view: DayView) -> int:
    return sum(activity.duration_minutes for activity in view.activities)


def day_hours(view: DayView) -> float:
    return round(day_minutes(view) / 60, 1)


class DayLoadChecker:
    name = "load"

    def __init__(
        self,
        max_day_hours: float = MAX_DAY_HOURS,
        flight_day_max_activities: int = FLIGHT_DAY_MAX_ACTIVITIES,
    ) -> None:
        self._max_day_hours = max_day_hours
        self._flight_day_max_activities = flight_day_max_activities

    def check(self, views: list[DayView], trip: Optional[Trip]) -> list[Finding]:
        findings: list[Finding] = []
        for view in views:
            if not view.activities:
                continue

            # Limit applies to raw minutes; rounded hours are for display only.
            if day_minutes(view) > self._max_day_hours * 60:
                total_hours = day_hours(view)
                findings.append(
                    Finding(
                        id=f"overloaded-day-{view.day.id}",
                        kind=FindingKind.WARNING,
                        priority=Priority.MEDIUM,
                        title="Overloaded Day Schedule",
                        description=(
                            f"Day {view.day_number} has {total_hours:g} hours of activities planned. "
                            "This might be too ambitious and exhausting!"
                        ),
                        affected_activities=view.activity_ids,
                        suggested_fix="Consider moving some activities to other days or removing less important ones.",
                        check=self.name,
                        day=view.day_number,
                    )
                )

            has_flight = any(a.activity_type == ActivityType.FLIGHT for a in view.activities)
            if has_flight and len(view.activities) > self._flight_day_max_activities:
                findings.append(
                    Finding(
                        id=f"flight-busy-day-{view.day.id}",
                        kind=FindingKind.WARNING,
                        priority=Priority.MEDIUM,
                        title="Flight Day Too Busy",
                        description=(
                            f"Day {view.day_number} has a flight plus {len(view.activities) - 1} other activities. "
                            "Flight days are usually tiring and unpredictable."
                        ),
                        affected_activities=view.activity_ids,
                        suggested_fix="Consider keeping flight days lighter with fewer activities.",
                        check=self.name,
                        day=view.day_number,
                    )
                )
        return findings


__all__ = ["DayLoadChecker", "day_hours", "day_minutes"]
