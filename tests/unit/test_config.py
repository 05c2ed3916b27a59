"""Tests for simplecalc.toml loading."""

from __future__ import annotations

import math
from pathlib import Path

import pytest

from simplecalc.core.config import (
    CONFIG_ENV_VAR,
    CalcConfig,
    find_config,
    load_config,
    parse_assignment_option,
    resolve_config,
)
from simplecalc.core.errors import ConfigError


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadConfig:
    """load_config reads constants and output flags."""

    def test_defaults(self) -> None:
        config = CalcConfig()
        assert config.constants == {"pi": math.pi}
        assert config.output.show_tokens is True
        assert config.output.show_tree is True
        assert config.source is None

    def test_full_file(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path / "simplecalc.toml",
            """
[constants]
e = 2.718281828459045
answer = 42

[output]
show_tokens = false
""",
        )
        config = load_config(path)
        assert config.constants == {"e": 2.718281828459045, "answer": 42.0}
        assert isinstance(config.constants["answer"], float)
        assert config.output.show_tokens is False
        assert config.output.show_tree is True
        assert config.source == path

    def test_missing_constants_keeps_pi(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "c.toml", "[output]\nshow_tree = false\n")
        assert load_config(path).constants == {"pi": math.pi}

    def test_empty_constants_table(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "c.toml", "[constants]\n")
        assert load_config(path).constants == {}

    def test_invalid_name(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "c.toml", '[constants]\n"2x" = 1\n')
        with pytest.raises(ConfigError, match="not a valid identifier"):
            load_config(path)

    @pytest.mark.parametrize("value", ['"three"', "true", "[1, 2]"])
    def test_invalid_value(self, tmp_path: Path, value: str) -> None:
        path = _write(tmp_path / "c.toml", f"[constants]\nx = {value}\n")
        with pytest.raises(ConfigError, match="must be a number"):
            load_config(path)

    @pytest.mark.parametrize("value", ['"false"', "0", "1", '""'])
    def test_invalid_output_flag(self, tmp_path: Path, value: str) -> None:
        path = _write(tmp_path / "c.toml", f"[output]\nshow_tokens = {value}\n")
        with pytest.raises(ConfigError, match="'show_tokens' must be true or false"):
            load_config(path)

    def test_output_must_be_table(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "c.toml", "output = 1\n")
        with pytest.raises(ConfigError, match=r"\[output\] must be a table"):
            load_config(path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "c.toml", "[constants\n")
        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(tmp_path / "absent.toml")


class TestFindConfig:
    """Explicit path, then environment variable, then working directory."""

    def test_nothing_found(self, tmp_path: Path) -> None:
        assert find_config(cwd=tmp_path) is None
        assert resolve_config(cwd=tmp_path) == CalcConfig()

    def test_working_directory(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "simplecalc.toml", "[constants]\nk = 1\n")
        assert find_config(cwd=tmp_path) == path
        assert resolve_config(cwd=tmp_path).constants == {"k": 1.0}

    def test_environment_variable(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write(tmp_path / "simplecalc.toml", "")
        other = _write(tmp_path / "other.toml", "")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(other))
        assert find_config(cwd=tmp_path) == other

    def test_explicit_path_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        explicit = tmp_path / "explicit.toml"
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.toml"))
        assert find_config(explicit, cwd=tmp_path) == explicit


class TestAssignmentOption:
    """NAME=VALUE overrides from the command line."""

    def test_valid(self) -> None:
        assert parse_assignment_option("x=4") == ("x", 4.0)
        assert parse_assignment_option(" rate = 1.5e-2") == ("rate", 0.015)

    @pytest.mark.parametrize("text", ["x", "=1", "1x=2", "a b=1"])
    def test_bad_name(self, text: str) -> None:
        with pytest.raises(ConfigError, match="NAME=VALUE"):
            parse_assignment_option(text)

    def test_bad_value(self) -> None:
        with pytest.raises(ConfigError, match="not a number"):
            parse_assignment_option("x=abc")
