"""Domain enums."""

from enum import Enum


class ActivityType(str, Enum):
    FLIGHT = "flight"
    HOTEL = "hotel"
    MEAL = "meal"
    ATTRACTION = "attraction"
    TRANSPORT = "transport"
    MISC = "misc"


class FindingKind(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    SUGGESTION = "suggestion"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class AnalysisStatus(str, Enum):
    CLEAN = "clean"
    READY = "ready"


class AnalyzerState(str, Enum):
    IDLE = "idle"
    ANALYZING = "analyzing"
    READY = "ready"


class ActivityTag(str, Enum):
    OUTBOUND_FLIGHT = "outbound_flight"
    RETURN_FLIGHT = "return_flight"
    ARRIVAL_FLIGHT = "arrival_flight"
    CHECK_IN = "check_in"
    CHECK_OUT = "check_out"
    BREAKFAST = "breakfast"
    DINNER = "dinner"
