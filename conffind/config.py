"""Settings and logging setup for conffind."""

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from dotenv import find_dotenv, load_dotenv

from conffind.core.constants import DEFAULT_LOG_LEVEL, ENV_FORMAT, ENV_LOG_LEVEL
from conffind.core.errors import LocatorConfigError
from conffind.core.types import FileFormat

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LocatorSettings:
    default_format: FileFormat | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, dotenv: bool = True
    ) -> "LocatorSettings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``
            dotenv: Load the nearest ``.env`` above the cwd first (existing variables win)

        Raises:
            LocatorConfigError: If a variable holds an unknown format or log level
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True), override=False)
        env = os.environ if environ is None else environ

        format_value = env.get(ENV_FORMAT, "").strip()
        default_format = FileFormat.from_name(format_value) if format_value else None

        log_level = env.get(ENV_LOG_LEVEL, "").strip().upper() or DEFAULT_LOG_LEVEL
        if log_level not in _LOG_LEVELS:
            raise LocatorConfigError(
                f"Invalid {ENV_LOG_LEVEL}: {log_level!r}. Expected one of: {', '.join(_LOG_LEVELS)}"
            )
        return cls(default_format=default_format, log_level=log_level)

    def apply_logging(self) -> logging.Logger:
        """Apply ``log_level`` to the ``conffind`` logger."""
        return configure_logging(self.log_level)


def configure_logging(level: str | int = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Set the level of the ``conffind`` logger and make sure it has a handler."""
    logger = logging.getLogger("conffind")
    logger.setLevel(level)
    if not any(isinstance(h, logging.NullHandler) for h in logger.handlers):
        logger.addHandler(logging.NullHandler())
    return logger
