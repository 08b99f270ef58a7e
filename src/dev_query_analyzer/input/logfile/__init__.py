from dev_query_analyzer.input.logfile.adapter import LogFileReplay
from dev_query_analyzer.input.logfile.parser import LoggedStatement, PostgresDurationLogParser

__all__ = ["LogFileReplay", "LoggedStatement", "PostgresDurationLogParser"]
