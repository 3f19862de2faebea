"""结构化日志: JSON line 格式，每次分析一个 trace_id"""

from __future__ import annotations

import json
import sys
import time
import uuid
from typing import Any, Optional


class StructuredLogger:
    """Structured logger writing one JSON object per line."""

    def __init__(self, trace_id: Optional[str] = None, output=None):
        self.trace_id = trace_id or str(uuid.uuid4())[:8]
        self._output = output or sys.stderr
        self._timers: dict[str, float] = {}

    def _emit(self, data: dict[str, Any]) -> None:
        data["trace_id"] = self.trace_id
        data["timestamp"] = time.time()
        try:
            line = json.dumps(data, ensure_ascii=False, default=str)
            self._output.write(line + "\n")
            self._output.flush()
        except Exception as exc:
            # Last-resort fallback to avoid silent logger failures.
            try:
                fallback = {
                    "event": "logger_internal_error",
                    "trace_id": self.trace_id,
                    "timestamp": time.time(),
                    "error": str(exc),
                }
                sys.stderr.write(json.dumps(fallback, ensure_ascii=False, default=str) + "\n")
                sys.stderr.flush()
            except Exception:
                return

    def check_start(self, check_name: str, **extra: Any) -> None:
        self._timers[check_name] = time.time()
        self._emit({"event": "check_start", "check": check_name, **extra})

    def check_end(self, check_name: str, *, findings_count: int = 0, **extra: Any) -> None:
        start = self._timers.pop(check_name, time.time())
        duration_ms = round((time.time() - start) * 1000, 1)
        self._emit({
            "event": "check_end",
            "check": check_name,
            "duration_ms": duration_ms,
            "findings_count": findings_count,
            **extra,
        })

    def error(self, check_name: str, error: str, **extra: Any) -> None:
        self._emit({"event": "error", "check": check_name, "error": error, **extra})

    def warning(self, check_name: str, message: str, **extra: Any) -> None:
        self._emit({"event": "warning", "check": check_name, "message": message, **extra})

    def summary(self, **extra: Any) -> None:
        self._emit({"event": "summary", **extra})
