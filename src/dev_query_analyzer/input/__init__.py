from dev_query_analyzer.input.logfile import (
    LogFileReplay,
    LoggedStatement,
    PostgresDurationLogParser,
)

__all__ = [
    "LogFileReplay",
    "LoggedStatement",
    "PostgresDurationLogParser",
]
