"""Domain package exports."""

from itinerary_analyzer.domain.constants import (
    BUDGET_OVERRUN_FACTOR,
    FLIGHT_DAY_MAX_ACTIVITIES,
    MAX_DAY_HOURS,
    MAX_FLIGHTS_PER_DAY,
)
from itinerary_analyzer.domain.enums import (
    ActivityTag,
    ActivityType,
    AnalysisStatus,
    AnalyzerState,
    FindingKind,
    Priority,
)
from itinerary_analyzer.domain.exceptions import CheckerFailure, ConfigurationError, DomainError
from itinerary_analyzer.domain.models import (
    Activity,
    AnalysisResult,
    CheckerDiagnostic,
    Day,
    DayView,
    Finding,
    PriorityBuckets,
    Trip,
)

__all__ = [
    "Activity",
    "ActivityTag",
    "ActivityType",
    "AnalysisResult",
    "AnalysisStatus",
    "AnalyzerState",
    "CheckerDiagnostic",
    "CheckerFailure",
    "ConfigurationError",
    "Day",
    "DayView",
    "DomainError",
    "Finding",
    "FindingKind",
    "Priority",
    "PriorityBuckets",
    "Trip",
    "BUDGET_OVERRUN_FACTOR",
    "FLIGHT_DAY_MAX_ACTIVITIES",
    "MAX_DAY_HOURS",
    "MAX_FLIGHTS_PER_DAY",
]
