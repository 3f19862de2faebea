"""Runtime configuration helpers."""

from itinerary_analyzer.config.settings import AnalyzerSettings, resolve_settings

__all__ = ["AnalyzerSettings", "resolve_settings"]
