"""Upward search for a named configuration file.

Starting at the working directory, each directory is probed for
``<subdirectory>/<name>.<ext>`` for every candidate extension in order, then
the search moves to the parent, in the same way git looks for its root.
"""

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from conffind.config import LocatorSettings
from conffind.core.constants import CURRENT_DIR, ENCODING, PARENT_DIR
from conffind.core.errors import ConfigNotFoundError, LocatorConfigError, LocatorIOError
from conffind.core.relpath import relativize
from conffind.core.types import FileFormat, all_extensions

_log = logging.getLogger("conffind.locator")


def _current_dir() -> Path:
    try:
        return Path.cwd()
    except OSError as e:
        raise LocatorIOError(e) from e


@dataclass(frozen=True)
class FileLocator:
    """Finds ``name`` (optionally under ``subdirectory``) in the cwd or any ancestor."""

    name: str
    subdirectory: str | None = None

    def __post_init__(self) -> None:
        if not self.name or self.name in (CURRENT_DIR, PARENT_DIR):
            raise LocatorConfigError(f"Invalid configuration file name: {self.name!r}")
        if os.sep in self.name or (os.altsep and os.altsep in self.name):
            raise LocatorConfigError(
                f"Configuration file name must not contain a separator: {self.name!r}"
            )

    @property
    def basename(self) -> Path:
        if self.subdirectory:
            return Path(self.subdirectory) / self.name
        return Path(self.name)

    def _candidates(self, directory: Path, extensions: Sequence[str]) -> list[Path]:
        base = directory / self.basename
        return [base.with_name(f"{base.name}.{ext}") for ext in extensions]

    def _search(self, start: Path, extensions: Sequence[str]) -> Path:
        if isinstance(extensions, str):
            raise LocatorConfigError(f"Extensions must be a sequence of strings, not {extensions!r}")
        if not extensions:
            raise LocatorConfigError(f"No candidate extensions given for {str(self.basename)!r}")

        current = start
        while True:
            _log.debug("Probing %s for %s", current, self.basename)
            for candidate in self._candidates(current, extensions):
                if candidate.is_file():
                    _log.debug("Found %s", candidate)
                    return candidate
            parent = current.parent
            if parent == current:
                raise ConfigNotFoundError(self.basename)
            current = parent

    def find(self, extensions: Sequence[str]) -> Path:
        """Return the absolute path of the nearest matching file.

        Within one directory the first extension in ``extensions`` wins; a
        nearer directory always wins over its ancestors.

        Raises:
            LocatorConfigError: If ``extensions`` is empty
            ConfigNotFoundError: If no directory up to the root has a match
            LocatorIOError: If the working directory cannot be determined
        """
        return self._search(_current_dir(), extensions)

    def locate(self, extensions: Sequence[str]) -> tuple[str | None, str]:
        """Find the file and read it.

        Returns:
            (display path relative to the cwd, or absolute if that is not computable; UTF-8 text)
        """
        cwd = _current_dir()
        path = self._search(cwd, extensions)

        display = relativize(path, cwd)
        if display is None:
            display = str(path)

        try:
            text = path.read_text(encoding=ENCODING)
        except (OSError, UnicodeDecodeError) as e:
            raise LocatorIOError(e, path) from e
        return display, text

    def resolve(
        self,
        format_hint: FileFormat | None = None,
        settings: LocatorSettings | None = None,
    ) -> tuple[str | None, str]:
        """Locate using the extensions of ``format_hint``.

        Without a hint the settings' default format is used, and without that
        every registered extension is tried.
        """
        fmt = format_hint
        if fmt is None and settings is not None:
            fmt = settings.default_format
        extensions = fmt.extensions() if fmt is not None else all_extensions()
        return self.locate(extensions)
