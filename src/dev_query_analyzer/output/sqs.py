import json
from dataclasses import asdict

from aiobotocore.session import get_session

from dev_query_analyzer.domain import QueryAnalysisReport


class SqsReportPublisher:
    """Publishes each report as a JSON message to an SQS queue."""

    def __init__(self, queue_url: str, region: str = "us-east-1") -> None:
        self._queue_url = queue_url
        self._region = region
        self._session = get_session()

    @property
    def name(self) -> str:
        return "sqs"

    async def publish(self, report: QueryAnalysisReport) -> None:
        async with self._session.create_client("sqs", region_name=self._region) as client:
            await client.send_message(
                QueueUrl=self._queue_url,
                MessageBody=self._serialize_report(report),
                MessageAttributes={
                    "request_id": {"DataType": "String", "StringValue": report.request_id},
                },
            )

    def _serialize_report(self, report: QueryAnalysisReport) -> str:
        payload = asdict(report)
        payload["has_issues"] = report.has_issues
        return json.dumps(payload)
