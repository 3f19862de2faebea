"""AnalysisSession: dismissal across passes and last-write-wins publishing."""

from __future__ import annotations

import io
import threading

from itinerary_analyzer.analysis import AnalysisSession, CheckerEngine, build_result
from itinerary_analyzer.domain.enums import AnalysisStatus, AnalyzerState, FindingKind, Priority
from itinerary_analyzer.domain.models import Activity, Day, Finding, Trip
from itinerary_analyzer.infrastructure.logging import StructuredLogger


def _snapshot():
    trip = Trip(id="t1", destination="Bali", duration_days=2, estimated_budget=200)
    days = [Day(id="d1", day_number=1), Day(id="d2", day_number=2)]
    activities = [
        Activity(id="a1", day_id="d1", title="Winter festival", activity_type="attraction"),
        Activity(id="a2", day_id="d2", title="Skiing lesson", activity_type="attraction"),
    ]
    return trip, days, activities


def _session(**kwargs) -> AnalysisSession:
    return AnalysisSession(logger=StructuredLogger(trace_id="s", output=io.StringIO()), **kwargs)


def _finding(fid: str) -> Finding:
    return Finding(id=fid, kind=FindingKind.WARNING, title=fid, priority=Priority.MEDIUM)


def test_new_session_is_idle():
    session = _session()
    assert session.state == AnalyzerState.IDLE
    assert session.result is None
    assert session.dismiss("anything") is None


def test_submit_publishes_result():
    session = _session()
    result = session.submit(*_snapshot())
    assert session.state == AnalyzerState.READY
    assert result is not None
    assert [f.id for f in result.findings] == ["season-mismatch-a1", "season-mismatch-a2"]
    assert result.snapshot_version == 1


def test_dismissal_survives_reanalysis_and_can_be_restored():
    session = _session()
    session.submit(*_snapshot())

    after_dismiss = session.dismiss("season-mismatch-a1")
    assert [f.id for f in after_dismiss.findings] == ["season-mismatch-a2"]
    assert [f.id for f in after_dismiss.findings_by_priority.medium] == ["season-mismatch-a2"]

    rerun = session.submit(*_snapshot())
    assert [f.id for f in rerun.findings] == ["season-mismatch-a2"]
    assert rerun.snapshot_version == 2

    restored = session.restore("season-mismatch-a1")
    assert [f.id for f in restored.findings] == ["season-mismatch-a1", "season-mismatch-a2"]


def test_dismissing_all_findings_is_clean():
    session = _session(dismissed_ids={"season-mismatch-a1", "season-mismatch-a2"})
    result = session.submit(*_snapshot())
    assert result.status == AnalysisStatus.CLEAN

    session.clear_dismissed()
    assert session.result.status == AnalysisStatus.READY


def test_stale_pass_never_overwrites_newer_one():
    session = _session()
    older = session.begin()
    newer = session.begin()
    assert session.publish(newer, build_result([_finding("fresh")], snapshot_version=newer))
    assert not session.publish(older, build_result([_finding("stale")], snapshot_version=older))
    assert [f.id for f in session.result.findings] == ["fresh"]
    assert session.state == AnalyzerState.READY


def test_pass_finishing_after_newer_snapshot_started_is_dropped():
    session = _session()
    older = session.begin()
    session.begin()
    assert not session.publish(older, build_result([_finding("stale")], snapshot_version=older))
    assert session.result is None
    assert session.state == AnalyzerState.ANALYZING


class _GatedChecker:
    """First call blocks until released; later calls return immediately."""

    name = "gated"

    def __init__(self):
        self.entered = threading.Event()
        self.release = threading.Event()
        self._calls = 0

    def check(self, views, trip):
        self._calls += 1
        if self._calls == 1:
            self.entered.set()
            self.release.wait(timeout=5)
            return [_finding("stale")]
        return [_finding("fresh")]


def test_slow_older_submit_is_dropped_end_to_end():
    checker = _GatedChecker()
    session = _session(engine=CheckerEngine((checker,)))
    older = {}

    worker = threading.Thread(target=lambda: older.update(result=session.submit(*_snapshot())))
    worker.start()
    assert checker.entered.wait(timeout=5)

    newer = session.submit(*_snapshot())
    checker.release.set()
    worker.join(timeout=5)

    assert older["result"] is None
    assert [f.id for f in newer.findings] == ["fresh"]
    assert [f.id for f in session.result.findings] == ["fresh"]
    assert session.result.snapshot_version == 2
    assert session.state == AnalyzerState.READY
