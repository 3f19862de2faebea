"""pytest 全局 fixtures: 测试环境隔离"""

import pytest

_ANALYZER_ENV = (
    "ANALYZER_MAX_DAY_HOURS",
    "ANALYZER_MAX_FLIGHTS_PER_DAY",
    "ANALYZER_FLIGHT_DAY_MAX_ACTIVITIES",
    "ANALYZER_BUDGET_OVERRUN_FACTOR",
    "ANALYZER_PARALLEL_CHECKS",
    "ANALYZER_MAX_WORKERS",
    "ANALYZER_DISABLED_CHECKS",
)


@pytest.fixture(autouse=True)
def clean_analyzer_env(monkeypatch):
    """默认清除分析器相关环境变量，确保测试使用默认阈值"""
    for name in _ANALYZER_ENV:
        monkeypatch.delenv(name, raising=False)
    yield
