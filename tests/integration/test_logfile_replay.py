from pathlib import Path

import pytest

from dev_query_analyzer import create_query_analyzer
from dev_query_analyzer.input import LogFileReplay

PREFIX = "2024-01-15 10:30:{second:02d} UTC:10.0.0.5(51234):app@shop:[{pid}]: LOG:  "

LOG_LINES = [
    PREFIX.format(second=0, pid=100) + "duration: 2.0 ms  statement: SELECT * FROM users WHERE id = 1",
    PREFIX.format(second=1, pid=100) + "duration: 1.5 ms  statement: SELECT * FROM posts WHERE user_id = 1",
    PREFIX.format(second=2, pid=200) + "duration: 240.0 ms  statement: SELECT * FROM orders",
    "\tWHERE customer_id = 9",
    PREFIX.format(second=3, pid=100) + "duration: 1.5 ms  statement: SELECT * FROM posts WHERE user_id = 2",
    PREFIX.format(second=4, pid=100) + "checkpoint starting: time",
    PREFIX.format(second=5, pid=100) + "duration: 1.0 ms  statement: SELECT * FROM posts WHERE user_id = 3",
]


def test_replay_groups_statements_by_process() -> None:
    warnings: list[str] = []
    tracker = create_query_analyzer(
        slow_query_threshold_ms=100, n_plus_one_threshold=3, writer=warnings.append
    )
    replay = LogFileReplay.from_lines(LOG_LINES)

    request_ids = replay.replay(tracker)

    assert request_ids == ("pg-100", "pg-200")

    connection_report = tracker.report("pg-100")
    assert connection_report is not None
    assert connection_report.total_queries == 4
    assert connection_report.total_duration_ms == 6.0
    assert [(d.pattern, d.count) for d in connection_report.n_plus_one_detections] == [
        ("SELECT * FROM posts WHERE user_id = ?", 3)
    ]

    slow_report = tracker.report("pg-200")
    assert slow_report is not None
    assert slow_report.slow_queries[0].sql == "SELECT * FROM orders WHERE customer_id = 9"
    assert slow_report.slow_queries[0].suggested_index == (
        "CREATE INDEX idx_orders_customer_id ON orders (customer_id);"
    )
    assert warnings[0].startswith("[SLOW QUERY] 240ms (threshold: 100ms)")


def test_replay_from_file(tmp_path: Path) -> None:
    log_file = tmp_path / "postgresql.log"
    log_file.write_text("\n".join(LOG_LINES) + "\n", encoding="utf-8")
    tracker = create_query_analyzer(writer=lambda message: None)

    request_ids = LogFileReplay(log_file, request_id_prefix="conn-").replay(tracker)

    assert request_ids == ("conn-100", "conn-200")
    report = tracker.report("conn-200")
    assert report is not None
    assert report.total_queries == 1


def test_iterating_file_yields_statements_in_order(tmp_path: Path) -> None:
    log_file = tmp_path / "postgresql.log"
    log_file.write_text("\n".join(LOG_LINES) + "\n", encoding="utf-8")

    statements = list(LogFileReplay(log_file))

    assert [s.process_id for s in statements] == [100, 100, 200, 100, 100]
    assert statements[2].sql == "SELECT * FROM orders WHERE customer_id = 9"


def test_replay_into_disabled_tracker_records_nothing() -> None:
    tracker = create_query_analyzer(enabled=False)

    request_ids = LogFileReplay.from_lines(LOG_LINES).replay(tracker)

    assert request_ids == ("pg-100", "pg-200")
    assert tracker.report("pg-100") is None


def test_missing_file_raises(tmp_path: Path) -> None:
    replay = LogFileReplay(tmp_path / "absent.log")

    with pytest.raises(FileNotFoundError):
        list(replay)
