"""Itinerary consistency analyzer."""

from itinerary_analyzer.analysis import AnalysisSession, analyze

__all__ = ["AnalysisSession", "analyze"]
