#
# tests/unit/test_config.py
#
"""Unit tests for configuration loading."""

from pathlib import Path

import pytest

from nestest.config import HarnessConfig, load_config
from nestest.exceptions import ConfigurationError


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "pyproject.toml"
    path.write_text(text)
    return path


class TestHarnessConfig:
    def test_defaults(self) -> None:
        config = HarnessConfig()
        assert config.separator == " -> "
        assert config.indent_marker == "  |  "
        assert config.capture_stdio is True
        assert config.show_traceback is False
        assert config.numeric_log_level == 30

    def test_rejects_bad_log_level(self) -> None:
        with pytest.raises(ValueError, match="Invalid log_level"):
            HarnessConfig(log_level="LOUD")

    def test_rejects_empty_separator(self) -> None:
        with pytest.raises(ValueError, match="separator"):
            HarnessConfig(separator="")


class TestLoadConfig:
    def test_none_yields_defaults(self) -> None:
        assert load_config(None) == HarnessConfig()

    def test_missing_table_yields_defaults(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '[project]\nname = "demo"\n')
        assert load_config(path) == HarnessConfig()

    def test_reads_tool_table(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            '[tool.nestest]\nseparator = " / "\nshow_traceback = true\nlog_level = "debug"\n',
        )

        config = load_config(path)

        assert config.separator == " / "
        assert config.show_traceback is True
        assert config.numeric_log_level == 10

    def test_unknown_key(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "[tool.nestest]\ntimeout = 5\n")
        with pytest.raises(ConfigurationError, match="Unknown key"):
            load_config(path)

    def test_invalid_value(self, tmp_path: Path) -> None:
        path = _write(tmp_path, '[tool.nestest]\nlog_level = "LOUD"\n')
        with pytest.raises(ConfigurationError, match="Invalid value"):
            load_config(path)

    @pytest.mark.parametrize(
        "line",
        ["log_level = 10", 'capture_stdio = "no"', "show_traceback = 1", "separator = 3"],
    )
    def test_wrong_value_type(self, tmp_path: Path, line: str) -> None:
        path = _write(tmp_path, f"[tool.nestest]\n{line}\n")
        with pytest.raises(ConfigurationError, match="Invalid value"):
            load_config(path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = _write(tmp_path, "[tool.nestest\n")
        with pytest.raises(ConfigurationError, match="Invalid TOML"):
            load_config(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "absent.toml")
