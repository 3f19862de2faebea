"""API request/response models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from itinerary_analyzer.domain.models import Activity, AnalysisResult, Day, Trip

SESSION_ID_PATTERN = r"^[A-Za-z0-9_-]+$"


class AnalyzeRequest(BaseModel):
    trip: Optional[Trip] = Field(default=None, description="Trip snapshot; null yields a clean result")
    days: list[Day] = Field(default_factory=list)
    activities: list[Activity] = Field(default_factory=list)
    dismissed_ids: list[str] = Field(default_factory=list, description="Finding ids hidden by the caller")


class SessionAnalyzeRequest(BaseModel):
    trip: Optional[Trip] = None
    days: list[Day] = Field(default_factory=list)
    activities: list[Activity] = Field(default_factory=list)


class DismissRequest(BaseModel):
    finding_id: str = Field(min_length=1, max_length=256)


class AnalyzeResponse(BaseModel):
    result: AnalysisResult
    summary: dict = Field(default_factory=dict)
    session_id: str = Field(default="")
    dismissed_ids: list[str] = Field(default_factory=list)


class HealthResponse(BaseModel):
    status: str = "ok"
    checks: list[str] = Field(default_factory=list)
    active_sessions: int = 0
