"""Geography/season checker driven by the destination mismatch table."""

from __future__ import annotations

from typing import Iterable, Optional

from itinerary_analyzer.domain.models import DayView, Finding, Trip
from itinerary_analyzer.domain.rules import MISMATCH_RULES, MismatchRule


class GeographyChecker:
    name = "geography"

    def __init__(self, rules: Iterable[MismatchRule] = MISMATCH_RULES) -> None:
        self._rules = tuple(rules)

    def check(self, views: list[DayView], trip: Optional[Trip]) -> list[Finding]:
        if trip is None or not trip.destination:
            return []

        findings: list[Finding] = []
        for view in views:
            for activity in view.activities:
                for rule in self._rules:
                    if not rule.matches(trip.destination, activity):
                        continue
                    findings.append(
                        Finding(
                            id=f"{rule.id_prefix}-{activity.id}",
                            kind=rule.kind,
                            priority=rule.priority,
                            title=rule.title,
                            description=rule.describe(trip.destination, activity),
                            affected_activities=[activity.id],
                            suggested_fix=rule.suggested_fix,
                            check=self.name,
                            day=view.day_number,
                        )
                    )
        return findings


__all__ = ["GeographyChecker"]
