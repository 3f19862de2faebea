"""Checker orchestration."""

from __future__ import annotations

from typing import Optional

from itinerary_analyzer.checkers.base import Checker, last_day_number
from itinerary_analyzer.checkers.budget_checker import BudgetChecker
from itinerary_analyzer.checkers.flight_checker import FlightLogicChecker
from itinerary_analyzer.checkers.geography_checker import GeographyChecker
from itinerary_analyzer.checkers.hotel_checker import HotelLogicChecker
from itinerary_analyzer.checkers.load_checker import DayLoadChecker
from itinerary_analyzer.checkers.sequence_checker import SequenceChecker
from itinerary_analyzer.config.settings import AnalyzerSettings


def default_checkers(settings: Optional[AnalyzerSettings] = None) -> tuple[Checker, ...]:
    settings = settings or AnalyzerSettings()
    checkers: tuple[Checker, ...] = (
        FlightLogicChecker(max_flights_per_day=settings.max_flights_per_day),
        HotelLogicChecker(),
        DayLoadChecker(
            max_day_hours=settings.max_day_hours,
            flight_day_max_activities=settings.flight_day_max_activities,
        ),
        GeographyChecker(),
        SequenceChecker(),
        BudgetChecker(overrun_factor=settings.budget_overrun_factor),
    )
    return tuple(checker for checker in checkers if settings.is_check_enabled(checker.name))


__all__ = [
    "BudgetChecker",
    "Checker",
    "DayLoadChecker",
    "FlightLogicChecker",
    "GeographyChecker",
    "HotelLogicChecker",
    "SequenceChecker",
    "default_checkers",
    "last_day_number",
]
