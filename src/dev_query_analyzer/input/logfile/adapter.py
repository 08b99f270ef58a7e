from collections.abc import Iterator
from pathlib import Path

from dev_query_analyzer.core import QueryTracker
from dev_query_analyzer.input.logfile.parser import LoggedStatement, PostgresDurationLogParser


class LogFileReplay:
    """Feeds statements from a PostgreSQL duration log through a query tracker.

    Each backend process id stands in for a request id, so a replay reports
    per connection rather than per logical request.
    """

    def __init__(
        self,
        file_path: str | Path,
        parser: PostgresDurationLogParser | None = None,
        request_id_prefix: str = "pg-",
    ) -> None:
        self._file_path = Path(file_path)
        self._parser = parser or PostgresDurationLogParser()
        self._request_id_prefix = request_id_prefix
        self._lines: list[str] | None = None

    @classmethod
    def from_lines(
        cls,
        lines: list[str],
        parser: PostgresDurationLogParser | None = None,
        request_id_prefix: str = "pg-",
    ) -> "LogFileReplay":
        """Create a replay from pre-loaded lines."""
        instance = cls(Path("/dev/null"), parser=parser, request_id_prefix=request_id_prefix)
        instance._lines = list(lines)
        return instance

    def __iter__(self) -> Iterator[LoggedStatement]:
        if self._lines is not None:
            yield from self._parser.parse_lines(self._lines)
            return

        if not self._file_path.exists():
            raise FileNotFoundError(f"Log file not found: {self._file_path}")
        with open(self._file_path, encoding="utf-8") as log_file:
            yield from self._parser.parse_lines(log_file)

    def request_id_for(self, statement: LoggedStatement) -> str:
        return f"{self._request_id_prefix}{statement.process_id}"

    def replay(self, tracker: QueryTracker) -> tuple[str, ...]:
        """Track every logged statement and return the request ids touched, in first-seen order."""
        request_ids: dict[str, None] = {}
        for statement in self:
            request_id = self.request_id_for(statement)
            tracker.track(statement.sql, statement.duration_ms, request_id)
            request_ids.setdefault(request_id, None)
        return tuple(request_ids)
