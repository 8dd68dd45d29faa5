"""Snapshot analysis module."""

from .snapshot import GameSnapshot
from .analyzer import (
    AnalysisError,
    AnalysisResult,
    AnalysisStatus,
    HandAnalysis,
    HandAnalyzer,
    analyze_snapshot,
)

__all__ = [
    "GameSnapshot",
    "AnalysisError",
    "AnalysisResult",
    "AnalysisStatus",
    "HandAnalysis",
    "HandAnalyzer",
    "analyze_snapshot",
]
