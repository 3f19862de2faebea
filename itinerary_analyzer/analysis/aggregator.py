"""Merge checker output into a prioritized, dismissible result."""

from __future__ import annotations

from typing import Iterable, Optional

from itinerary_analyzer.domain.enums import AnalysisStatus, Priority
from itinerary_analyzer.domain.models import AnalysisResult, CheckerDiagnostic, Finding, PriorityBuckets


def merge_findings(groups: Iterable[list[Finding]]) -> list[Finding]:
    """Concatenate per-checker findings; the first finding with a given id wins."""
    merged: list[Finding] = []
    seen: set[str] = set()
    for group in groups:
        for finding in group:
            if finding.id in seen:
                continue
            seen.add(finding.id)
            merged.append(finding)
    return merged


def apply_dismissals(findings: list[Finding], dismissed_ids: Optional[Iterable[str]]) -> list[Finding]:
    if not dismissed_ids:
        return list(findings)
    dismissed = set(dismissed_ids)
    return [finding for finding in findings if finding.id not in dismissed]


def group_by_priority(findings: list[Finding]) -> PriorityBuckets:
    return PriorityBuckets(
        high=[f for f in findings if f.priority == Priority.HIGH],
        medium=[f for f in findings if f.priority == Priority.MEDIUM],
        low=[f for f in findings if f.priority == Priority.LOW],
    )


def build_result(
    findings: list[Finding],
    *,
    diagnostics: Optional[list[CheckerDiagnostic]] = None,
    snapshot_version: Optional[int] = None,
    trace_id: str = "",
) -> AnalysisResult:
    return AnalysisResult(
        status=AnalysisStatus.READY if findings else AnalysisStatus.CLEAN,
        findings=list(findings),
        findings_by_priority=group_by_priority(findings),
        diagnostics=list(diagnostics or []),
        snapshot_version=snapshot_version,
        trace_id=trace_id,
    )


__all__ = ["apply_dismissals", "build_result", "group_by_priority", "merge_findings"]
