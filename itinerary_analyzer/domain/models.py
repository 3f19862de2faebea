"""Pydantic domain models."""

from __future__ import annotations

import datetime as dt
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from itinerary_analyzer.domain.enums import ActivityType, AnalysisStatus, FindingKind, Priority


class Trip(BaseModel):
    id: str
    title: str = ""
    destination: str = ""
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    duration_days: int = 1
    estimated_budget: float = Field(default=0.0, ge=0)

    @field_validator("destination", mode="before")
    @classmethod
    def _none_destination(cls, value: Any) -> Any:
        return "" if value is None else value


class Day(BaseModel):
    id: str
    trip_id: str = ""
    day_number: int = 1
    date: Optional[dt.date] = None
    title: str = ""


class Activity(BaseModel):
    id: str
    day_id: str
    title: str = ""
    description: Optional[str] = None
    activity_type: ActivityType = ActivityType.MISC
    estimated_cost: float = Field(default=0.0, ge=0)
    duration_minutes: int = Field(default=0, ge=0)
    order_index: int = 0

    @field_validator("activity_type", mode="before")
    @classmethod
    def _fallback_activity_type(cls, value: Any) -> Any:
        if isinstance(value, ActivityType):
            return value
        raw = str(value or "").strip().lower()
        try:
            return ActivityType(raw)
        except ValueError:
            return ActivityType.MISC

    @field_validator("title", mode="before")
    @classmethod
    def _none_title(cls, value: Any) -> Any:
        return "" if value is None else value


class DayView(BaseModel):
    """One day of the snapshot with its activities in ``order_index`` order."""

    day: Day
    activities: list[Activity] = Field(default_factory=list)

    @property
    def day_number(self) -> int:
        return self.day.day_number

    @property
    def activity_ids(self) -> list[str]:
        return [activity.id for activity in self.activities]


class Finding(BaseModel):
    id: str
    kind: FindingKind
    title: str
    description: str = ""
    affected_activities: list[str] = Field(default_factory=list)
    suggested_fix: Optional[str] = None
    priority: Priority = Priority.MEDIUM
    check: str = ""
    day: Optional[int] = None


class PriorityBuckets(BaseModel):
    high: list[Finding] = Field(default_factory=list)
    medium: list[Finding] = Field(default_factory=list)
    low: list[Finding] = Field(default_factory=list)

    def counts(self) -> dict[str, int]:
        return {"high": len(self.high), "medium": len(self.medium), "low": len(self.low)}


class CheckerDiagnostic(BaseModel):
    check: str
    error_type: str
    message: str = ""


class AnalysisResult(BaseModel):
    status: AnalysisStatus = AnalysisStatus.CLEAN
    findings: list[Finding] = Field(default_factory=list)
    findings_by_priority: PriorityBuckets = Field(default_factory=PriorityBuckets)
    diagnostics: list[CheckerDiagnostic] = Field(default_factory=list)
    snapshot_version: Optional[int] = None
    trace_id: str = ""

    @property
    def is_clean(self) -> bool:
        return self.status == AnalysisStatus.CLEAN

    def summary(self) -> dict[str, Any]:
        total = len(self.findings)
        if total == 0:
            headline = "No issues detected"
        else:
            headline = f"Found {total} suggestion{'s' if total != 1 else ''} to improve your trip"
        return {
            "status": self.status.value,
            "total": total,
            "by_priority": self.findings_by_priority.counts(),
            "headline": headline,
        }
