"""Hotel logic checker: check-in/check-out ordering."""

from __future__ import annotations

from typing import Optional

from itinerary_analyzer.checkers.base import last_day_number
from itinerary_analyzer.domain.enums import ActivityTag, ActivityType, FindingKind, Priority
from itinerary_analyzer.domain.models import Activity, DayView, Finding, Trip
from itinerary_analyzer.domain.rules import has_tag


class HotelLogicChecker:
    name = "hotel"

    def check(self, views: list[DayView], trip: Optional[Trip]) -> list[Finding]:
        stays: list[tuple[int, Activity]] = [
            (view.day_number, activity)
            for view in views
            for activity in view.activities
            if activity.activity_type == ActivityType.HOTEL
        ]
        check_ins = [(day, item) for day, item in stays if has_tag(item, ActivityTag.CHECK_IN)]
        check_outs = [(day, item) for day, item in stays if has_tag(item, ActivityTag.CHECK_OUT)]

        findings: list[Finding] = []
        for in_day, check_in in check_ins:
            for out_day, check_out in check_outs:
                if out_day > in_day:
                    continue
                findings.append(
                    Finding(
                        id=f"hotel-logic-{check_in.id}-{check_out.id}",
                        kind=FindingKind.ERROR,
                        priority=Priority.HIGH,
                        title="Hotel Check-in/Check-out Logic Error",
                        description=(
                            f'You have hotel check-out "{check_out.title}" on Day {out_day} but '
                            f'check-in "{check_in.title}" on Day {in_day}. '
                            "You can't check out before checking in!"
                        ),
                        affected_activities=[check_in.id, check_out.id],
                        suggested_fix="Move check-in to an earlier day or check-out to a later day.",
                        check=self.name,
                        day=out_day,
                    )
                )

        last_day = last_day_number(views)
        for in_day, check_in in check_ins:
            if in_day == last_day:
                findings.append(
                    Finding(
                        id=f"hotel-checkin-lastday-{check_in.id}",
                        kind=FindingKind.WARNING,
                        priority=Priority.MEDIUM,
                        title="Hotel Check-in on Last Day",
                        description=(
                            f"You're checking into a hotel on Day {last_day} (your last day). "
                            "This might not be necessary if you're departing the same day."
                        ),
                        affected_activities=[check_in.id],
                        suggested_fix="Consider if you really need accommodation on your departure day.",
                        check=self.name,
                        day=in_day,
                    )
                )
        return findings


__all__ = ["HotelLogicChecker"]
