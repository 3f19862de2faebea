"""Single entrypoint: analyze one trip snapshot."""

from __future__ import annotations

from typing import Iterable, Optional

from itinerary_analyzer.analysis.aggregator import apply_dismissals, build_result, merge_findings
from itinerary_analyzer.analysis.assembler import build_day_views
from itinerary_analyzer.analysis.engine import CheckerEngine
from itinerary_analyzer.config.settings import AnalyzerSettings
from itinerary_analyzer.domain.models import Activity, AnalysisResult, Day, Trip
from itinerary_analyzer.infrastructure.logging import StructuredLogger


def analyze(
    trip: Optional[Trip],
    days: Iterable[Day],
    activities: Iterable[Activity],
    dismissed_ids: Optional[Iterable[str]] = None,
    *,
    settings: Optional[AnalyzerSettings] = None,
    engine: Optional[CheckerEngine] = None,
    logger: Optional[StructuredLogger] = None,
    snapshot_version: Optional[int] = None,
) -> AnalysisResult:
    """Run every enabled checker over the snapshot and return bucketed findings.

    The snapshot is never mutated. A missing trip, no days or no activities
    yields a clean result without running any checker. A checker that raises
    contributes no findings and is reported in ``diagnostics`` instead.
    """
    day_list = list(days)
    activity_list = list(activities)
    log = logger or StructuredLogger()

    if trip is None or not day_list or not activity_list:
        log.summary(status="clean", findings=0, skipped="empty_snapshot")
        return build_result([], snapshot_version=snapshot_version, trace_id=log.trace_id)

    engine = engine or CheckerEngine.default(settings)
    views = build_day_views(day_list, activity_list)
    groups, diagnostics = engine.evaluate(views, trip, logger=log)

    visible = apply_dismissals(merge_findings(groups), dismissed_ids)
    result = build_result(
        visible,
        diagnostics=diagnostics,
        snapshot_version=snapshot_version,
        trace_id=log.trace_id,
    )
    log.summary(
        status=result.status.value,
        trip_id=trip.id,
        days=len(views),
        findings=len(result.findings),
        by_priority=result.findings_by_priority.counts(),
        failed_checks=[d.check for d in diagnostics],
    )
    return result


__all__ = ["analyze"]
