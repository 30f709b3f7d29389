"""Service layer package."""

from .analysis_service import AnalysisService, analysis_service

__all__ = ["AnalysisService", "analysis_service"]
