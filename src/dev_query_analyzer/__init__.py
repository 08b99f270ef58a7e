__version__ = "0.1.0"

from dev_query_analyzer.analyzers import normalize_query, suggest_index
from dev_query_analyzer.core import (
    AnalyzerOptions,
    QueryTracker,
    ReportPipeline,
    create_query_analyzer,
)
from dev_query_analyzer.domain import (
    NPlusOneDetection,
    QueryAnalysisReport,
    SlowQueryWarning,
    TrackedQuery,
)
from dev_query_analyzer.input import LogFileReplay, PostgresDurationLogParser
from dev_query_analyzer.output import (
    ConsoleReportPublisher,
    ConsoleSink,
    DiagnosticSink,
    LoggerSink,
    ReportPublisher,
)

__all__ = [
    "__version__",
    "QueryTracker",
    "create_query_analyzer",
    "AnalyzerOptions",
    "ReportPipeline",
    "normalize_query",
    "suggest_index",
    "TrackedQuery",
    "SlowQueryWarning",
    "NPlusOneDetection",
    "QueryAnalysisReport",
    "DiagnosticSink",
    "ReportPublisher",
    "LoggerSink",
    "ConsoleSink",
    "ConsoleReportPublisher",
    "LogFileReplay",
    "PostgresDurationLogParser",
]
