"""Build the per-day snapshot view consumed by every checker."""

from __future__ import annotations

from typing import Iterable

from itinerary_analyzer.domain.models import Activity, Day, DayView


def build_day_views(days: Iterable[Day], activities: Iterable[Activity]) -> list[DayView]:
    ordered_days = sorted(days, key=lambda day: day.day_number)
    by_day: dict[str, list[Activity]] = {day.id: [] for day in ordered_days}
    for activity in activities:
        bucket = by_day.get(activity.day_id)
        if bucket is not None:
            bucket.append(activity)
    return [
        DayView(day=day, activities=sorted(by_day[day.id], key=lambda a: a.order_index))
        for day in ordered_days
    ]


__all__ = ["build_day_views"]
