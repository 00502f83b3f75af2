from conffind.config import LocatorSettings, configure_logging
from conffind.core.errors import (
    ConfigNotFoundError,
    LocatorConfigError,
    LocatorError,
    LocatorIOError,
)
from conffind.core.relpath import relativize
from conffind.core.types import FileFormat, all_extensions
from conffind.locator import FileLocator

__all__ = [
    "ConfigNotFoundError",
    "FileFormat",
    "FileLocator",
    "LocatorConfigError",
    "LocatorError",
    "LocatorIOError",
    "LocatorSettings",
    "all_extensions",
    "configure_logging",
    "relativize",
]
