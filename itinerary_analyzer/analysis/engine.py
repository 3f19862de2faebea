"""Checker engine: run independent checks with per-checker isolation."""

from __future__ import annotations

import concurrent.futures
import logging
from typing import Optional

from itinerary_analyzer.checkers import Checker, default_checkers
from itinerary_analyzer.config.settings import AnalyzerSettings
from itinerary_analyzer.domain.exceptions import CheckerFailure
from itinerary_analyzer.domain.models import CheckerDiagnostic, DayView, Finding, Trip
from itinerary_analyzer.infrastructure.logging import StructuredLogger

_logger = logging.getLogger("itinerary-analyzer.engine")


class CheckerEngine:
    def __init__(
        self,
        checkers: tuple[Checker, ...],
        *,
        parallel: bool = False,
        max_workers: int = 6,
    ) -> None:
        self._checkers = checkers
        self._parallel = parallel
        self._max_workers = max(1, max_workers)

    @classmethod
    def default(cls, settings: Optional[AnalyzerSettings] = None) -> "CheckerEngine":
        settings = settings or AnalyzerSettings()
        return cls(
            default_checkers(settings),
            parallel=settings.parallel_checks,
            max_workers=settings.max_workers,
        )

    @property
    def check_names(self) -> list[str]:
        return [checker.name for checker in self._checkers]

    def evaluate(
        self,
        views: list[DayView],
        trip: Optional[Trip],
        *,
        logger: Optional[StructuredLogger] = None,
    ) -> tuple[list[list[Finding]], list[CheckerDiagnostic]]:
        """Return findings grouped per checker (in checker order) and failure diagnostics."""
        if self._parallel and len(self._checkers) > 1:
            outcomes = self._run_parallel(views, trip, logger)
        else:
            outcomes = [self._run_one(checker, views, trip, logger) for checker in self._checkers]

        groups: list[list[Finding]] = []
        diagnostics: list[CheckerDiagnostic] = []
        for findings, diagnostic in outcomes:
            groups.append(findings)
            if diagnostic is not None:
                diagnostics.append(diagnostic)
        return groups, diagnostics

    def _run_parallel(
        self,
        views: list[DayView],
        trip: Optional[Trip],
        logger: Optional[StructuredLogger],
    ) -> list[tuple[list[Finding], Optional[CheckerDiagnostic]]]:
        workers = min(self._max_workers, len(self._checkers))
        with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as pool:
            futures = [
                pool.submit(self._run_one, checker, views, trip, logger)
                for checker in self._checkers
            ]
            # Joined in submission order so output matches a sequential run.
            return [future.result() for future in futures]

    @staticmethod
    def _run_one(
        checker: Checker,
        views: list[DayView],
        trip: Optional[Trip],
        logger: Optional[StructuredLogger],
    ) -> tuple[list[Finding], Optional[CheckerDiagnostic]]:
        if logger is not None:
            logger.check_start(checker.name)
        try:
            findings = list(checker.check(views, trip))
        except Exception as exc:
            failure = CheckerFailure(checker.name, exc)
            _logger.warning("Checker skipped: %s", failure)
            if logger is not None:
                logger.error(checker.name, str(failure), error_type=type(exc).__name__)
            return [], CheckerDiagnostic(
                check=checker.name,
                error_type=type(exc).__name__,
                message=str(exc),
            )
        if logger is not None:
            logger.check_end(checker.name, findings_count=len(findings))
        return findings, None


__all__ = ["CheckerEngine"]
