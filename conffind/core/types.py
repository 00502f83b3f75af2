"""Format registry: which filename extensions each configuration format accepts."""

from enum import Enum

from conffind.core.errors import LocatorConfigError


class FileFormat(Enum):
    TOML = "toml"
    JSON = "json"
    YAML = "yaml"
    INI = "ini"

    def extensions(self) -> list[str]:
        """Filename extensions accepted for this format, highest priority first."""
        return list(_EXTENSIONS[self])

    @classmethod
    def from_name(cls, name: str) -> "FileFormat":
        """Look up a format by its name or by one of its extensions (case-insensitive)."""
        key = name.strip().lower().lstrip(".")
        for fmt in cls:
            if key == fmt.value or key in _EXTENSIONS[fmt]:
                return fmt
        supported = ", ".join(fmt.value for fmt in cls)
        raise LocatorConfigError(f"Unknown file format: {name!r}. Supported formats: {supported}")


_EXTENSIONS: dict[FileFormat, tuple[str, ...]] = {
    FileFormat.TOML: ("toml",),
    FileFormat.JSON: ("json",),
    FileFormat.YAML: ("yaml", "yml"),
    FileFormat.INI: ("ini",),
}


def all_extensions() -> list[str]:
    """Extensions of every registered format, in registry order."""
    seen: list[str] = []
    for fmt in FileFormat:
        for ext in _EXTENSIONS[fmt]:
            if ext not in seen:
                seen.append(ext)
    return seen
