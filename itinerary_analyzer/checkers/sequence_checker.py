"""Sequence checker: meal placement and transport after landing."""

from __future__ import annotations

from typing import Optional

from itinerary_analyzer.domain.constants import (
    BREAKFAST_LATEST_INDEX,
    DINNER_TAIL_WINDOW,
    SEQUENCE_MIN_ACTIVITIES,
)
from itinerary_analyzer.domain.enums import ActivityTag, ActivityType, FindingKind, Priority
from itinerary_analyzer.domain.models import DayView, Finding, Trip
from itinerary_analyzer.domain.rules import has_tag


class SequenceChecker:
    name = "sequence"

    def check(self, views: list[DayView], trip: Optional[Trip]) -> list[Finding]:
        findings: list[Finding] = []
        for view in views:
            if len(view.activities) < SEQUENCE_MIN_ACTIVITIES:
                continue
            findings.extend(self._meal_timing(view))
            transport = self._airport_transport(view)
            if transport is not None:
                findings.append(transport)
        return findings

    def _meal_timing(self, view: DayView) -> list[Finding]:
        # Positions are counted within the day's meals, not the whole day.
        meals = [a for a in view.activities if a.activity_type == ActivityType.MEAL]
        findings: list[Finding] = []
        for index, meal in enumerate(meals):
            if has_tag(meal, ActivityTag.BREAKFAST) and index > BREAKFAST_LATEST_INDEX:
                findings.append(
                    Finding(
                        id=f"breakfast-timing-{meal.id}",
                        kind=FindingKind.SUGGESTION,
                        priority=Priority.LOW,
                        title="Breakfast Timing",
                        description=(
                            f'"{meal.title}" is scheduled late in your Day {view.day_number} activities. '
                            "Breakfast is usually one of the first activities."
                        ),
                        affected_activities=[meal.id],
                        suggested_fix="Consider moving breakfast earlier in the day.",
                        check=self.name,
                        day=view.day_number,
                    )
                )
            if has_tag(meal, ActivityTag.DINNER) and index < len(view.activities) - DINNER_TAIL_WINDOW:
                findings.append(
                    Finding(
                        id=f"dinner-timing-{meal.id}",
                        kind=FindingKind.SUGGESTION,
                        priority=Priority.LOW,
                        title="Dinner Timing",
                        description=(
                            f'"{meal.title}" is scheduled early in your Day {view.day_number} activities. '
                            "Dinner is usually one of the last activities."
                        ),
                        affected_activities=[meal.id],
                        suggested_fix="Consider moving dinner later in the day.",
                        check=self.name,
                        day=view.day_number,
                    )
                )
        return findings

    def _airport_transport(self, view: DayView) -> Optional[Finding]:
        flight_index = next(
            (idx for idx, a in enumerate(view.activities) if has_tag(a, ActivityTag.ARRIVAL_FLIGHT)),
            None,
        )
        if flight_index is None:
            return None

        after = view.activities[flight_index + 1 :]
        if not after or any(a.activity_type == ActivityType.TRANSPORT for a in after):
            return None

        return Finding(
            id=f"missing-transport-{view.day.id}",
            kind=FindingKind.SUGGESTION,
            priority=Priority.MEDIUM,
            title="Missing Airport Transport",
            description=(
                f"You have activities planned after arriving at the airport on Day {view.day_number}, "
                "but no transport from the airport."
            ),
            affected_activities=[a.id for a in view.activities[flight_index:]],
            suggested_fix="Consider adding transport from the airport to your next activity.",
            check=self.name,
            day=view.day_number,
        )


__all__ = ["SequenceChecker"]
