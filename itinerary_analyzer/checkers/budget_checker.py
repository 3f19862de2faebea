"""Budget checker: expensive days and suspiciously free days (read-only)."""

from __future__ import annotations

from typing import Optional

from itinerary_analyzer.domain.constants import BUDGET_OVERRUN_FACTOR, FREE_DAY_MIN_ACTIVITIES
from itinerary_analyzer.domain.enums import FindingKind, Priority
from itinerary_analyzer.domain.exceptions import ConfigurationError
from itinerary_analyzer.domain.models import DayView, Finding, Trip


def daily_budget(trip: Trip) -> float:
    if trip.duration_days <= 0:
        raise ConfigurationError(f"trip {trip.id} has duration_days={trip.duration_days}; expected > 0")
    return float(trip.estimated_budget) / float(trip.duration_days)


def day_cost(view: DayView) -> float:
    return float(sum(activity.estimated_cost for activity in view.activities))


def _money(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _overrun_description(day_number: int, cost: float, budget_per_day: float) -> str:
    # No percentage against a zero budget.
    if budget_per_day == 0:
        return f"Day {day_number} costs ${_money(cost)}, which exceeds your daily budget ($0)."
    percent = round(cost / budget_per_day * 100)
    return (
        f"Day {day_number} costs ${_money(cost)}, which is {percent}% "
        f"of your daily budget (${round(budget_per_day)})."
    )


class BudgetChecker:
    name = "budget"

    def __init__(self, overrun_factor: float = BUDGET_OVERRUN_FACTOR) -> None:
        self._overrun_factor = overrun_factor

    def check(self, views: list[DayView], trip: Optional[Trip]) -> list[Finding]:
        if trip is None:
            return []

        budget_per_day = daily_budget(trip)
        findings: list[Finding] = []

        for view in views:
            cost = day_cost(view)

            if cost > budget_per_day * self._overrun_factor:
                findings.append(
                    Finding(
                        id=f"expensive-day-{view.day.id}",
                        kind=FindingKind.WARNING,
                        priority=Priority.MEDIUM,
                        title="Expensive Day Alert",
                        description=_overrun_description(view.day_number, cost, budget_per_day),
                        affected_activities=view.activity_ids,
                        suggested_fix=(
                            "Consider moving some expensive activities to other days "
                            "or finding cheaper alternatives."
                        ),
                        check=self.name,
                        day=view.day_number,
                    )
                )

            if cost == 0 and len(view.activities) > FREE_DAY_MIN_ACTIVITIES:
                findings.append(
                    Finding(
                        id=f"free-day-{view.day.id}",
                        kind=FindingKind.SUGGESTION,
                        priority=Priority.LOW,
                        title="Completely Free Day",
                        description=(
                            f"Day {view.day_number} has {len(view.activities)} activities but costs $0. "
                            "This might be unrealistic."
                        ),
                        affected_activities=view.activity_ids,
                        suggested_fix="Double-check if these activities are truly free or if you missed some costs.",
                        check=self.name,
                        day=view.day_number,
                    )
                )
        return findings


__all__ = ["BudgetChecker", "daily_budget", "day_cost"]
