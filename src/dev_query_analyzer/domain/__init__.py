"""Domain models for query tracking and analysis."""

from dev_query_analyzer.domain.models import (
    NPlusOneDetection,
    QueryAnalysisReport,
    SlowQueryWarning,
    TrackedQuery,
)

__all__ = [
    "NPlusOneDetection",
    "QueryAnalysisReport",
    "SlowQueryWarning",
    "TrackedQuery",
]
