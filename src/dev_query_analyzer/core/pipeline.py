from collections.abc import Sequence

from dev_query_analyzer.core.tracker import QueryTracker
from dev_query_analyzer.domain import QueryAnalysisReport
from dev_query_analyzer.output import ReportPublisher


class ReportPipeline:
    """End-of-request step: report, release the request log, publish."""

    def __init__(
        self,
        tracker: QueryTracker,
        publishers: Sequence[ReportPublisher] = (),
        publish_clean_reports: bool = False,
    ) -> None:
        self._tracker = tracker
        self._publishers = tuple(publishers)
        self._publish_clean_reports = publish_clean_reports

    @property
    def publishers(self) -> tuple[ReportPublisher, ...]:
        return self._publishers

    async def finish(self, request_id: str) -> QueryAnalysisReport | None:
        report = self._tracker.report(request_id)
        self._tracker.clear(request_id)

        if report is None:
            return None
        if report.has_issues or self._publish_clean_reports:
            for publisher in self._publishers:
                await publisher.publish(report)
        return report
