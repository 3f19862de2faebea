"""Flight logic checker: outbound/return placement and flights per day."""

from __future__ import annotations

from typing import Optional

from itinerary_analyzer.checkers.base import last_day_number
from itinerary_analyzer.domain.constants import MAX_FLIGHTS_PER_DAY
from itinerary_analyzer.domain.enums import ActivityTag, ActivityType, FindingKind, Priority
from itinerary_analyzer.domain.models import Activity, DayView, Finding, Trip
from itinerary_analyzer.domain.rules import has_tag


class FlightLogicChecker:
    name = "flight"

    def __init__(self, max_flights_per_day: int = MAX_FLIGHTS_PER_DAY) -> None:
        self._max_flights_per_day = max_flights_per_day

    def check(self, views: list[DayView], trip: Optional[Trip]) -> list[Finding]:
        flights: list[tuple[int, Activity]] = [
            (view.day_number, activity)
            for view in views
            for activity in view.activities
            if activity.activity_type == ActivityType.FLIGHT
        ]
        if not flights:
            return []

        findings: list[Finding] = []
        last_day = last_day_number(views)

        for day_number, flight in flights:
            if has_tag(flight, ActivityTag.OUTBOUND_FLIGHT) and day_number > 1:
                findings.append(
                    Finding(
                        id=f"flight-departure-{flight.id}",
                        kind=FindingKind.ERROR,
                        priority=Priority.HIGH,
                        title="Departure Flight Timing Issue",
                        description=(
                            f'Your departure flight "{flight.title}" is scheduled for Day {day_number}, '
                            "but departure flights typically happen on Day 1 or the last day of your trip."
                        ),
                        affected_activities=[flight.id],
                        suggested_fix=(
                            "Move this flight to Day 1 if it's your outbound flight, "
                            "or to the last day if it's your return flight."
                        ),
                        check=self.name,
                        day=day_number,
                    )
                )

        for day_number, flight in flights:
            if has_tag(flight, ActivityTag.RETURN_FLIGHT) and 1 < day_number < last_day:
                findings.append(
                    Finding(
                        id=f"flight-return-{flight.id}",
                        kind=FindingKind.ERROR,
                        priority=Priority.HIGH,
                        title="Return Flight Timing Issue",
                        description=(
                            f'Your return flight "{flight.title}" is on Day {day_number}, '
                            "but you have activities planned for later days."
                        ),
                        affected_activities=[flight.id],
                        suggested_fix=f"Move this flight to Day {last_day} (your last day) or adjust your trip duration.",
                        check=self.name,
                        day=day_number,
                    )
                )

        by_day: dict[int, list[Activity]] = {}
        for day_number, flight in flights:
            by_day.setdefault(day_number, []).append(flight)

        for day_number in sorted(by_day):
            day_flights = by_day[day_number]
            if len(day_flights) > self._max_flights_per_day:
                findings.append(
                    Finding(
                        id=f"multiple-flights-day-{day_number}",
                        kind=FindingKind.WARNING,
                        priority=Priority.MEDIUM,
                        title="Multiple Flights Same Day",
                        description=(
                            f"You have {len(day_flights)} flights scheduled for Day {day_number}. "
                            "This might be too many for one day."
                        ),
                        affected_activities=[flight.id for flight in day_flights],
                        suggested_fix="Consider spreading flights across different days or combining connecting flights.",
                        check=self.name,
                        day=day_number,
                    )
                )
        return findings


__all__ = ["FlightLogicChecker"]
