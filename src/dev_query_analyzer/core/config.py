"""Query analyzer settings.

Uses pydantic-settings to load from environment variables (prefixed
QUERY_ANALYZER_), with explicit constructor values taking precedence:

- APP_ENV: "development" or "test" enables the analyzer by default
- QUERY_ANALYZER_ENABLED: explicit on/off switch, wins over APP_ENV
- QUERY_ANALYZER_SLOW_QUERY_THRESHOLD_MS: slow query threshold in milliseconds
- QUERY_ANALYZER_N_PLUS_ONE_THRESHOLD: repeat count that flags an N+1 pattern

Thresholds are only read once the analyzer is known to be enabled, so a
disabled analyzer never fails on a stray threshold variable.
"""

from typing import Any, Final

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SLOW_QUERY_THRESHOLD_MS: Final = 100
DEFAULT_N_PLUS_ONE_THRESHOLD: Final = 3

DEV_ENVIRONMENTS: Final = frozenset({"development", "test"})


class AnalyzerSwitch(BaseSettings):
    """Master on/off switch, resolved before anything else is read."""

    enabled: bool | None = None
    app_env: str = Field(default="", validation_alias="APP_ENV")

    model_config = SettingsConfigDict(
        env_prefix="QUERY_ANALYZER_",
        extra="ignore",
        env_ignore_empty=True,
        populate_by_name=True,
    )

    @property
    def is_enabled(self) -> bool:
        if self.enabled is not None:
            return self.enabled
        return self.app_env.strip().lower() in DEV_ENVIRONMENTS


class AnalyzerOptions(BaseSettings):
    """Resolved query analyzer settings."""

    enabled: bool = False
    slow_query_threshold_ms: float = Field(default=DEFAULT_SLOW_QUERY_THRESHOLD_MS, ge=0)
    n_plus_one_threshold: int = Field(default=DEFAULT_N_PLUS_ONE_THRESHOLD, ge=2)

    model_config = SettingsConfigDict(
        env_prefix="QUERY_ANALYZER_",
        extra="ignore",
        env_ignore_empty=True,
        frozen=True,
    )

    @classmethod
    def resolve(
        cls,
        *,
        slow_query_threshold_ms: float | None = None,
        n_plus_one_threshold: int | None = None,
        enabled: bool | None = None,
    ) -> "AnalyzerOptions":
        """Build options from explicit values, falling back to the environment.

        A disabled analyzer gets the defaults without reading or validating
        the threshold variables.

        Raises:
            pydantic.ValidationError: On malformed or out-of-range values for
                an enabled analyzer, or a malformed QUERY_ANALYZER_ENABLED.
        """
        if enabled is None:
            enabled = AnalyzerSwitch().is_enabled
        if not enabled:
            return cls.model_construct(
                enabled=False,
                slow_query_threshold_ms=DEFAULT_SLOW_QUERY_THRESHOLD_MS,
                n_plus_one_threshold=DEFAULT_N_PLUS_ONE_THRESHOLD,
            )

        explicit: dict[str, Any] = {"enabled": True}
        if slow_query_threshold_ms is not None:
            explicit["slow_query_threshold_ms"] = slow_query_threshold_ms
        if n_plus_one_threshold is not None:
            explicit["n_plus_one_threshold"] = n_plus_one_threshold
        return cls(**explicit)
