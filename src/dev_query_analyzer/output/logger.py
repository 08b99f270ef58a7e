import logging

LOGGER_NAME = "dev_query_analyzer"


class LoggerSink:
    """Default sink: one WARNING record per diagnostic message."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(LOGGER_NAME)

    @property
    def name(self) -> str:
        return "logger"

    def __call__(self, message: str) -> None:
        self._logger.warning(message)
