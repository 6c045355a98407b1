"""
Model Package Initialization
============================

All Pydantic models are exported from this module.

Usage:
    from phishhunter.models import AnalysisResult, ScanReport
"""

from .models import (
    AnalysisResult,
    ErrorInfo,
    LinkHint,
    RawAnalysisPayload,
    ScanReport,
    ValidationOutcome,
    risk_level_for_score,
)

__all__ = [
    "AnalysisResult",
    "ErrorInfo",
    "LinkHint",
    "RawAnalysisPayload",
    "ScanReport",
    "ValidationOutcome",
    "risk_level_for_score",
]
