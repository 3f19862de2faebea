"""Caller-side analysis session: dismissals and last-write-wins publishing."""

from __future__ import annotations

import logging
import threading
from typing import Iterable, Optional

from itinerary_analyzer.analysis.aggregator import apply_dismissals, build_result
from itinerary_analyzer.analysis.analyzer import analyze
from itinerary_analyzer.analysis.engine import CheckerEngine
from itinerary_analyzer.config.settings import AnalyzerSettings
from itinerary_analyzer.domain.enums import AnalyzerState
from itinerary_analyzer.domain.models import Activity, AnalysisResult, Day, Trip
from itinerary_analyzer.infrastructure.logging import StructuredLogger

_logger = logging.getLogger("itinerary-analyzer.session")


class AnalysisSession:
    """Holds what outlives a single pass: the dismissed ids and the freshest result.

    Every snapshot gets a version number. Only the result for the most
    recently started snapshot is published; a pass that finishes after a
    newer snapshot arrived is discarded.
    """

    def __init__(
        self,
        *,
        settings: Optional[AnalyzerSettings] = None,
        engine: Optional[CheckerEngine] = None,
        dismissed_ids: Optional[Iterable[str]] = None,
        logger: Optional[StructuredLogger] = None,
    ) -> None:
        self._engine = engine or CheckerEngine.default(settings)
        self._logger = logger
        self._dismissed: set[str] = set(dismissed_ids or ())
        self._state = AnalyzerState.IDLE
        self._latest_version = 0
        self._raw: Optional[AnalysisResult] = None
        self._lock = threading.Lock()

    @property
    def state(self) -> AnalyzerState:
        return self._state

    @property
    def dismissed_ids(self) -> frozenset[str]:
        with self._lock:
            return frozenset(self._dismissed)

    @property
    def latest_version(self) -> int:
        return self._latest_version

    @property
    def result(self) -> Optional[AnalysisResult]:
        """The published result with current dismissals applied."""
        with self._lock:
            raw = self._raw
            dismissed = set(self._dismissed)
        if raw is None:
            return None
        return self._visible(raw, dismissed)

    def begin(self) -> int:
        """Start a new snapshot; any pass still running becomes stale."""
        with self._lock:
            self._latest_version += 1
            self._state = AnalyzerState.ANALYZING
            return self._latest_version

    def publish(self, version: int, raw: AnalysisResult) -> bool:
        with self._lock:
            if version != self._latest_version:
                _logger.info(
                    "Discarding stale analysis v%s (latest v%s)", version, self._latest_version
                )
                return False
            self._raw = raw
            self._state = AnalyzerState.READY
            return True

    def submit(
        self,
        trip: Optional[Trip],
        days: Iterable[Day],
        activities: Iterable[Activity],
    ) -> Optional[AnalysisResult]:
        """Analyze a new snapshot; returns the visible result, or None if superseded."""
        with self._lock:
            self._state = AnalyzerState.IDLE
        version = self.begin()
        raw = analyze(
            trip,
            days,
            activities,
            engine=self._engine,
            logger=self._logger,
            snapshot_version=version,
        )
        if not self.publish(version, raw):
            return None
        return self.result

    def dismiss(self, finding_id: str) -> Optional[AnalysisResult]:
        with self._lock:
            self._dismissed.add(finding_id)
        return self.result

    def restore(self, finding_id: str) -> Optional[AnalysisResult]:
        with self._lock:
            self._dismissed.discard(finding_id)
        return self.result

    def clear_dismissed(self) -> None:
        with self._lock:
            self._dismissed.clear()

    @staticmethod
    def _visible(raw: AnalysisResult, dismissed: set[str]) -> AnalysisResult:
        return build_result(
            apply_dismissals(raw.findings, dismissed),
            diagnostics=raw.diagnostics,
            snapshot_version=raw.snapshot_version,
            trace_id=raw.trace_id,
        )


__all__ = ["AnalysisSession"]
