import pytest


@pytest.fixture(autouse=True)
def analyzer_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "test")
    for name in (
        "QUERY_ANALYZER_ENABLED",
        "QUERY_ANALYZER_SLOW_QUERY_THRESHOLD_MS",
        "QUERY_ANALYZER_N_PLUS_ONE_THRESHOLD",
    ):
        monkeypatch.delenv(name, raising=False)
