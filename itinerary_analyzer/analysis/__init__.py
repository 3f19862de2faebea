"""Analysis pipeline: assemble views, run checkers, aggregate findings."""

from itinerary_analyzer.analysis.aggregator import (
    apply_dismissals,
    build_result,
    group_by_priority,
    merge_findings,
)
from itinerary_analyzer.analysis.analyzer import analyze
from itinerary_analyzer.analysis.assembler import build_day_views
from itinerary_analyzer.analysis.engine import CheckerEngine
from itinerary_analyzer.analysis.session import AnalysisSession

__all__ = [
    "AnalysisSession",
    "CheckerEngine",
    "analyze",
    "apply_dismissals",
    "build_day_views",
    "build_result",
    "group_by_priority",
    "merge_findings",
]
