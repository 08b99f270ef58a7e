"""Core domain models for query tracking and analysis reports."""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(frozen=True, slots=True)
class TrackedQuery:
    """A single executed statement recorded for one request."""

    sql: str
    duration_ms: float
    request_id: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(frozen=True, slots=True)
class SlowQueryWarning:
    """A tracked query whose duration exceeded the slow-query threshold."""

    sql: str
    duration_ms: float
    request_id: str
    suggested_index: str | None = None


@dataclass(frozen=True, slots=True)
class NPlusOneDetection:
    """A normalized pattern repeated often enough within one request to look like N+1."""

    pattern: str
    count: int
    request_id: str
    suggestion: str


@dataclass(frozen=True, slots=True)
class QueryAnalysisReport:
    """Aggregate analysis of every query tracked for a request."""

    request_id: str
    total_queries: int
    total_duration_ms: float
    slow_queries: tuple[SlowQueryWarning, ...] = field(default_factory=tuple)
    n_plus_one_detections: tuple[NPlusOneDetection, ...] = field(default_factory=tuple)

    @property
    def has_issues(self) -> bool:
        """Return True when the report holds slow queries or N+1 detections."""
        return bool(self.slow_queries or self.n_plus_one_detections)
