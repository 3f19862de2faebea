"""FastAPI 主应用: itinerary analysis for the planning UI"""

from __future__ import annotations

import logging
import os
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Path, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from itinerary_analyzer.analysis import AnalysisSession, CheckerEngine, analyze
from itinerary_analyzer.api.schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    DismissRequest,
    HealthResponse,
    SessionAnalyzeRequest,
    SESSION_ID_PATTERN,
)
from itinerary_analyzer.config import resolve_settings
from itinerary_analyzer.domain.models import AnalysisResult
from itinerary_analyzer.infrastructure.session_store import build_session_store

_api_logger = logging.getLogger("itinerary-analyzer.api")

load_dotenv()  # 自动加载 .env 文件

app = FastAPI(
    title="itinerary-analyzer",
    version="1.0.0",
    docs_url="/docs" if os.getenv("ENABLE_DOCS", "false").lower() == "true" else None,
    redoc_url=None,
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """注入安全响应头"""
    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        response.headers["Cache-Control"] = "no-store"
        return response


app.add_middleware(SecurityHeadersMiddleware)

_cors_origins = os.getenv("CORS_ORIGINS", "*").split(",")
app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

settings = resolve_settings()
engine = CheckerEngine.default(settings)
store = build_session_store()


def _respond(
    result: Optional[AnalysisResult],
    *,
    session_id: str = "",
    dismissed_ids: frozenset[str] | set[str] = frozenset(),
) -> AnalyzeResponse:
    result = result or AnalysisResult()
    return AnalyzeResponse(
        result=result,
        summary=result.summary(),
        session_id=session_id,
        dismissed_ids=sorted(dismissed_ids),
    )


@app.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok", checks=engine.check_names, active_sessions=store.active_count)


@app.post("/analyze", response_model=AnalyzeResponse)
def analyze_snapshot(req: AnalyzeRequest):
    """Stateless analysis: dismissed ids are supplied by the caller."""
    result = analyze(req.trip, req.days, req.activities, req.dismissed_ids, engine=engine)
    return _respond(result, dismissed_ids=set(req.dismissed_ids))


@app.post("/sessions/{session_id}/analyze", response_model=AnalyzeResponse)
def analyze_in_session(
    req: SessionAnalyzeRequest,
    session_id: str = Path(min_length=1, max_length=64, pattern=SESSION_ID_PATTERN),
):
    session = store.get_or_create(session_id, lambda: AnalysisSession(settings=settings))
    result = session.submit(req.trip, req.days, req.activities)
    if result is None:
        _api_logger.info("Session %s analysis superseded by a newer snapshot", session_id)
        result = session.result
    return _respond(result, session_id=session_id, dismissed_ids=session.dismissed_ids)


@app.post("/sessions/{session_id}/dismiss", response_model=AnalyzeResponse)
def dismiss_finding(
    req: DismissRequest,
    session_id: str = Path(min_length=1, max_length=64, pattern=SESSION_ID_PATTERN),
):
    session = store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"unknown session: {session_id}")
    result = session.dismiss(req.finding_id)
    return _respond(result, session_id=session_id, dismissed_ids=session.dismissed_ids)


@app.post("/sessions/{session_id}/restore", response_model=AnalyzeResponse)
def restore_finding(
    req: DismissRequest,
    session_id: str = Path(min_length=1, max_length=64, pattern=SESSION_ID_PATTERN),
):
    session = store.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"unknown session: {session_id}")
    result = session.restore(req.finding_id)
    return _respond(result, session_id=session_id, dismissed_ids=session.dismissed_ids)
