from dev_query_analyzer.core.config import AnalyzerOptions, AnalyzerSwitch
from dev_query_analyzer.core.pipeline import ReportPipeline
from dev_query_analyzer.core.tracker import QueryTracker, create_query_analyzer

__all__ = [
    "AnalyzerOptions",
    "AnalyzerSwitch",
    "QueryTracker",
    "ReportPipeline",
    "create_query_analyzer",
]
