import sys
from typing import TextIO

from dev_query_analyzer.domain import QueryAnalysisReport


class ConsoleSink:
    """Console sink that prints each diagnostic message with a prefix."""

    def __init__(self, prefix: str = "[query-analyzer]", stream: TextIO | None = None) -> None:
        self._prefix = prefix
        self._stream = stream

    @property
    def name(self) -> str:
        return "console"

    def __call__(self, message: str) -> None:
        stream = self._stream if self._stream is not None else sys.stderr
        print(f"{self._prefix} {message}", file=stream)


class ConsoleReportPublisher:
    """Console output adapter for request reports."""

    def __init__(self, prefix: str = "[QUERIES]") -> None:
        self._prefix = prefix

    @property
    def name(self) -> str:
        return "console"

    async def publish(self, report: QueryAnalysisReport) -> None:
        print(
            f"{self._prefix} {report.request_id}: {report.total_queries} queries "
            f"in {report.total_duration_ms:g}ms - {len(report.slow_queries)} slow, "
            f"{len(report.n_plus_one_detections)} N+1"
        )

        for warning in report.slow_queries:
            print(f"  - slow ({warning.duration_ms:g}ms): {_preview(warning.sql)}")
            if warning.suggested_index:
                print(f"    {warning.suggested_index}")

        for detection in report.n_plus_one_detections:
            print(f"  - N+1 ({detection.count}x): {_preview(detection.pattern)}")


def _preview(sql: str, limit: int = 80) -> str:
    if len(sql) <= limit:
        return sql
    return sql[:limit] + "..."
