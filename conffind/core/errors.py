"""Error taxonomy for configuration file lookup."""

from pathlib import Path


class LocatorError(Exception):
    """Base class for every error raised by conffind."""


class ConfigNotFoundError(LocatorError, FileNotFoundError):
    """No candidate file exists between the working directory and the root."""

    def __init__(self, basename: str | Path) -> None:
        self.basename = str(basename)
        super().__init__(f'configuration file "{self.basename}" not found')


class LocatorIOError(LocatorError):
    """Working directory lookup, open, read or decode failed.

    The underlying exception is kept as ``original`` and chained as ``__cause__``.
    """

    def __init__(self, original: BaseException, path: Path | None = None) -> None:
        self.original = original
        self.path = path
        where = f" ({path})" if path is not None else ""
        super().__init__(f"{type(original).__name__}: {original}{where}")


class LocatorConfigError(LocatorError, ValueError):
    """Invalid lookup arguments or settings."""
