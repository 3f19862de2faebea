"""Analyzer settings resolved from the environment."""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from itinerary_analyzer.domain.constants import (
    BUDGET_OVERRUN_FACTOR,
    FLIGHT_DAY_MAX_ACTIVITIES,
    MAX_DAY_HOURS,
    MAX_FLIGHTS_PER_DAY,
)

_TRUTHY = {"1", "true", "yes", "on"}


def _is_enabled(value: str | None) -> bool:
    return bool(value and value.strip().lower() in _TRUTHY)


def _float_env(name: str, default: float) -> float:
    raw = str(os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _int_env(name: str, default: int) -> int:
    raw = str(os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _csv_env(name: str) -> frozenset[str]:
    raw = str(os.getenv(name) or "")
    return frozenset(part.strip().lower() for part in raw.split(",") if part.strip())


class AnalyzerSettings(BaseModel):
    max_day_hours: float = Field(default=MAX_DAY_HOURS, gt=0)
    max_flights_per_day: int = Field(default=MAX_FLIGHTS_PER_DAY, ge=0)
    flight_day_max_activities: int = Field(default=FLIGHT_DAY_MAX_ACTIVITIES, ge=0)
    budget_overrun_factor: float = Field(default=BUDGET_OVERRUN_FACTOR, gt=0)
    parallel_checks: bool = False
    max_workers: int = Field(default=6, ge=1)
    disabled_checks: frozenset[str] = Field(default_factory=frozenset)

    def is_check_enabled(self, name: str) -> bool:
        return name.lower() not in self.disabled_checks


def resolve_settings() -> AnalyzerSettings:
    return AnalyzerSettings(
        max_day_hours=_float_env("ANALYZER_MAX_DAY_HOURS", MAX_DAY_HOURS),
        max_flights_per_day=_int_env("ANALYZER_MAX_FLIGHTS_PER_DAY", MAX_FLIGHTS_PER_DAY),
        flight_day_max_activities=_int_env("ANALYZER_FLIGHT_DAY_MAX_ACTIVITIES", FLIGHT_DAY_MAX_ACTIVITIES),
        budget_overrun_factor=_float_env("ANALYZER_BUDGET_OVERRUN_FACTOR", BUDGET_OVERRUN_FACTOR),
        parallel_checks=_is_enabled(os.getenv("ANALYZER_PARALLEL_CHECKS")),
        max_workers=max(1, _int_env("ANALYZER_MAX_WORKERS", 6)),
        disabled_checks=_csv_env("ANALYZER_DISABLED_CHECKS"),
    )


__all__ = ["AnalyzerSettings", "resolve_settings"]
