"""Provide the structured logger of the package."""

from functools import cache
from logging import Logger
from typing import Any, Protocol

from pycti.utils.opencti_logger import logger as pycti_logger

from attack_data_model.settings import get_settings

LOGGER_NAME = "attack-data-model"


class StructuredLogger(Protocol):
    """Logging methods of the pycti logger used by the validation core."""

    local_logger: Logger

    def debug(self, message: str, meta: dict[str, Any] | None = None) -> None: ...

    def info(self, message: str, meta: dict[str, Any] | None = None) -> None: ...

    def warning(self, message: str, meta: dict[str, Any] | None = None) -> None: ...


@cache
def get_logger(name: str = LOGGER_NAME) -> StructuredLogger:
    """Return the pycti structured logger configured from the settings."""
    settings = get_settings()
    app_logger_class = pycti_logger(settings.log_level.upper(), settings.json_logging)
    return app_logger_class(name)  # type: ignore[no-any-return]
