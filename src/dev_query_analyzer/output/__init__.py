from dev_query_analyzer.output.base import DiagnosticSink, ReportPublisher
from dev_query_analyzer.output.console import ConsoleReportPublisher, ConsoleSink
from dev_query_analyzer.output.logger import LoggerSink
from dev_query_analyzer.output.sqs import SqsReportPublisher

__all__ = [
    "DiagnosticSink",
    "ReportPublisher",
    "ConsoleSink",
    "ConsoleReportPublisher",
    "LoggerSink",
    "SqsReportPublisher",
]
