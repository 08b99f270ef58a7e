import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True, slots=True)
class LoggedStatement:
    """A statement and its duration as recorded by log_min_duration_statement."""

    sql: str
    duration_ms: float
    process_id: int
    timestamp: datetime
    user_name: str | None = None
    database_name: str | None = None


class PostgresDurationLogParser:
    """Parser for PostgreSQL duration log lines.

    Expects ``log_line_prefix = '%t:%r:%u@%d:[%p]: '`` and statements logged
    through ``log_min_duration_statement``, e.g.::

        2024-01-15 10:30:00 UTC:10.0.0.5(51234):app@shop:[4242]: LOG:  duration: 12.5 ms  statement: SELECT 1

    Statements spanning several lines continue on tab-indented lines.
    """

    LOG_LINE_PATTERN = re.compile(
        r"^(?P<ts>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2})(?:\.\d+)?\s+(?P<tz>\w+)"
        r":(?P<client>[^:]*):"
        r"(?P<conn>[^:]*)"
        r":\[(?P<pid>\d+)\]:\s*"
        r"(?P<level>\w+):\s*"
        r"(?P<message>.*)$"
    )

    DURATION_PATTERN = re.compile(
        r"^duration:\s+(?P<duration>\d+(?:\.\d+)?)\s+ms\s+"
        r"(?:statement|execute\s+[^:]*):\s*(?P<sql>.*)$"
    )

    USER_DB_PATTERN = re.compile(r"^(?P<user>[^@]+)(?:@(?P<db>.+))?$")

    def parse_line(self, line: str) -> LoggedStatement | None:
        """Parse one log line. Returns None unless it logs a timed statement."""
        line = line.rstrip("\r\n")
        if not line.strip():
            return None

        match = self.LOG_LINE_PATTERN.match(line.strip())
        if not match:
            return None

        duration_match = self.DURATION_PATTERN.match(match.group("message"))
        if not duration_match:
            return None

        user_name, database_name = self._parse_user_db(match.group("conn").strip())
        return LoggedStatement(
            sql=duration_match.group("sql").strip(),
            duration_ms=float(duration_match.group("duration")),
            process_id=int(match.group("pid")),
            timestamp=self._parse_timestamp(match.group("ts"), match.group("tz")),
            user_name=user_name,
            database_name=database_name,
        )

    def parse_lines(self, lines: Iterable[str]) -> Iterator[LoggedStatement]:
        """Parse a stream of lines, folding continuation lines into their statement."""
        pending: LoggedStatement | None = None

        for line in lines:
            if pending is not None and line[:1] in ("\t", " ") and line.strip():
                pending = LoggedStatement(
                    sql=f"{pending.sql} {line.strip()}",
                    duration_ms=pending.duration_ms,
                    process_id=pending.process_id,
                    timestamp=pending.timestamp,
                    user_name=pending.user_name,
                    database_name=pending.database_name,
                )
                continue

            if pending is not None:
                yield pending
            pending = self.parse_line(line)

        if pending is not None:
            yield pending

    def _parse_timestamp(self, ts_str: str, tz_str: str) -> datetime:
        dt = datetime.strptime(ts_str, "%Y-%m-%d %H:%M:%S")
        if tz_str.upper() == "UTC":
            dt = dt.replace(tzinfo=timezone.utc)
        return dt

    def _parse_user_db(self, conn: str) -> tuple[str | None, str | None]:
        if not conn:
            return None, None
        match = self.USER_DB_PATTERN.match(conn)
        if not match:
            return None, None
        return match.group("user") or None, match.group("db") or None
