import pytest

from conffind.core.errors import LocatorConfigError
from conffind.core.types import FileFormat, all_extensions


class TestFileFormat:
    def test_extensions_in_priority_order(self) -> None:
        assert FileFormat.TOML.extensions() == ["toml"]
        assert FileFormat.YAML.extensions() == ["yaml", "yml"]

    def test_extensions_returns_copy(self) -> None:
        exts = FileFormat.JSON.extensions()
        exts.append("jsonc")
        assert FileFormat.JSON.extensions() == ["json"]

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("toml", FileFormat.TOML),
            ("JSON", FileFormat.JSON),
            ("yml", FileFormat.YAML),
            (".yaml", FileFormat.YAML),
            (" ini ", FileFormat.INI),
        ],
    )
    def test_from_name(self, name: str, expected: FileFormat) -> None:
        assert FileFormat.from_name(name) is expected

    def test_from_name_unknown(self) -> None:
        with pytest.raises(LocatorConfigError, match="Unknown file format"):
            FileFormat.from_name("xml")


class TestAllExtensions:
    def test_registry_order(self) -> None:
        assert all_extensions() == ["toml", "json", "yaml", "yml", "ini"]
