from typing import Protocol, runtime_checkable

from dev_query_analyzer.domain import QueryAnalysisReport


@runtime_checkable
class DiagnosticSink(Protocol):
    """Protocol for synchronous destinations of diagnostic warning messages.

    Any single-argument callable qualifies, so ``list.append`` or a plain
    function can be passed wherever a sink is expected.
    """

    def __call__(self, message: str) -> None:
        ...


@runtime_checkable
class ReportPublisher(Protocol):
    """Protocol for destinations of finished request reports."""

    @property
    def name(self) -> str:
        ...

    async def publish(self, report: QueryAnalysisReport) -> None:
        ...
