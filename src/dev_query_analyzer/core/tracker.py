"""Development-time query tracker.

Records every statement executed for a logical request, warns about slow
queries as they happen, and on demand reports slow queries and N+1 patterns
for the request. A disabled tracker does nothing at all: ``track`` returns
before allocating anything and ``report`` always returns None.

Usage::

    tracker = create_query_analyzer(slow_query_threshold_ms=50)
    tracker.track("SELECT * FROM users WHERE id = $1", 75, "req-123")
    report = tracker.report("req-123")
    tracker.clear("req-123")
"""

import threading
from collections import Counter

from dev_query_analyzer.analyzers import normalize_query, suggest_index
from dev_query_analyzer.core.config import AnalyzerOptions
from dev_query_analyzer.domain import (
    NPlusOneDetection,
    QueryAnalysisReport,
    SlowQueryWarning,
    TrackedQuery,
)
from dev_query_analyzer.output import DiagnosticSink, LoggerSink


class QueryTracker:
    def __init__(
        self,
        *,
        slow_query_threshold_ms: float | None = None,
        n_plus_one_threshold: int | None = None,
        enabled: bool | None = None,
        writer: DiagnosticSink | None = None,
    ) -> None:
        self._options = AnalyzerOptions.resolve(
            slow_query_threshold_ms=slow_query_threshold_ms,
            n_plus_one_threshold=n_plus_one_threshold,
            enabled=enabled,
        )
        self._enabled = self._options.enabled
        self._slow_threshold_ms = self._options.slow_query_threshold_ms
        self._n_plus_one_threshold = self._options.n_plus_one_threshold
        self._writer = writer if writer is not None else LoggerSink()
        self._queries: dict[str, list[TrackedQuery]] = {}
        self._lock = threading.Lock()

    @property
    def options(self) -> AnalyzerOptions:
        return self._options

    def is_enabled(self) -> bool:
        return self._enabled

    def track(self, sql: str, duration_ms: float, request_id: str) -> None:
        """Record one executed statement. No-op when disabled."""
        if not self._enabled:
            return

        entry = TrackedQuery(sql=sql, duration_ms=duration_ms, request_id=request_id)
        with self._lock:
            self._queries.setdefault(request_id, []).append(entry)

        if duration_ms > self._slow_threshold_ms:
            suggestion = suggest_index(sql)
            index_hint = f"\n  Suggested index: {suggestion}" if suggestion else ""
            self._writer(
                f"[SLOW QUERY] {_format_ms(duration_ms)}ms "
                f"(threshold: {_format_ms(self._slow_threshold_ms)}ms)\n"
                f"  SQL: {sql}{index_hint}\n"
                f"  Request: {request_id}"
            )

    def report(self, request_id: str) -> QueryAnalysisReport | None:
        """Analyze every query tracked for a request.

        Emits one N+1 warning through the sink per repeated pattern, so calling
        this twice for the same request repeats those warnings. Returns None
        when disabled or when nothing was tracked for the request.
        """
        if not self._enabled:
            return None

        with self._lock:
            queries = tuple(self._queries.get(request_id, ()))
        if not queries:
            return None

        slow_queries = tuple(
            SlowQueryWarning(
                sql=q.sql,
                duration_ms=q.duration_ms,
                request_id=q.request_id,
                suggested_index=suggest_index(q.sql),
            )
            for q in queries
            if q.duration_ms > self._slow_threshold_ms
        )

        detections: list[NPlusOneDetection] = []
        pattern_counts = Counter(normalize_query(q.sql) for q in queries)
        for pattern, count in pattern_counts.items():
            if count < self._n_plus_one_threshold:
                continue
            detections.append(
                NPlusOneDetection(
                    pattern=pattern,
                    count=count,
                    request_id=request_id,
                    suggestion=(
                        f"Query executed {count} times in one request. Consider using a "
                        "JOIN or batch query (WHERE id IN (...)) instead."
                    ),
                )
            )
            self._writer(
                f"[N+1 DETECTED] Query repeated {count}x in request {request_id}\n"
                f"  Pattern: {pattern}\n"
                "  Fix: Use a JOIN or batch query (WHERE id IN (...))"
            )

        return QueryAnalysisReport(
            request_id=request_id,
            total_queries=len(queries),
            total_duration_ms=sum(q.duration_ms for q in queries),
            slow_queries=slow_queries,
            n_plus_one_detections=tuple(detections),
        )

    def clear(self, request_id: str) -> None:
        with self._lock:
            self._queries.pop(request_id, None)

    def clear_all(self) -> None:
        with self._lock:
            self._queries.clear()

    @property
    def tracked_request_ids(self) -> tuple[str, ...]:
        with self._lock:
            return tuple(self._queries)


def create_query_analyzer(
    *,
    slow_query_threshold_ms: float | None = None,
    n_plus_one_threshold: int | None = None,
    enabled: bool | None = None,
    writer: DiagnosticSink | None = None,
) -> QueryTracker:
    """Create a query tracker, disabled outside development and test by default."""
    return QueryTracker(
        slow_query_threshold_ms=slow_query_threshold_ms,
        n_plus_one_threshold=n_plus_one_threshold,
        enabled=enabled,
        writer=writer,
    )


def _format_ms(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)
