"""Workflow coordination package."""

from .orchestrator import AnalysisOrchestrator, AnalysisResult

__all__ = [
    "AnalysisOrchestrator",
    "AnalysisResult",
]
