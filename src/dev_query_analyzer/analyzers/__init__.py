from dev_query_analyzer.analyzers.index_advisor import suggest_index
from dev_query_analyzer.analyzers.normalizer import normalize_query

__all__ = [
    "normalize_query",
    "suggest_index",
]
