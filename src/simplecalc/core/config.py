"""
Configuration for simplecalc.

Loads simplecalc.toml:

    [constants]
    pi = 3.141592653589793
    g = 9.81

    [output]
    show_tokens = true
    show_tree = true

The file is found via an explicit path, $SIMPLECALC_CONFIG, or the
working directory, in that order.
"""

import math
import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError
from .fsm import IDENTIFIER_RECOGNIZER

CONFIG_FILENAME = "simplecalc.toml"
CONFIG_ENV_VAR = "SIMPLECALC_CONFIG"


def default_constants() -> dict[str, float]:
    return {"pi": math.pi}


@dataclass
class OutputConfig:
    """Which pipeline stages the CLI prints before the result."""

    show_tokens: bool = True
    show_tree: bool = True


@dataclass
class CalcConfig:
    """Top-level configuration loaded from simplecalc.toml."""

    constants: dict[str, float] = field(default_factory=default_constants)
    output: OutputConfig = field(default_factory=OutputConfig)
    source: Path | None = None  # File the config was read from, if any


def is_identifier(name: str) -> bool:
    return IDENTIFIER_RECOGNIZER.run(name) == name


def _parse_constants(raw: object, path: Path) -> dict[str, float]:
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: [constants] must be a table")

    constants: dict[str, float] = {}
    for name, value in raw.items():
        if not is_identifier(name):
            raise ConfigError(f"{path}: constant name {name!r} is not a valid identifier")
        # bool is an int subclass; TOML true/false are not numbers here
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"{path}: constant {name!r} must be a number, got {value!r}")
        constants[name] = float(value)
    return constants


def _parse_output(raw: object, path: Path) -> OutputConfig:
    if not isinstance(raw, dict):
        raise ConfigError(f"{path}: [output] must be a table")

    flags: dict[str, bool] = {}
    for name in ("show_tokens", "show_tree"):
        value = raw.get(name, True)
        if not isinstance(value, bool):
            raise ConfigError(f"{path}: output option {name!r} must be true or false, got {value!r}")
        flags[name] = value
    return OutputConfig(**flags)


def load_config(path: Path) -> CalcConfig:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    constants = default_constants()
    if "constants" in data:
        constants = _parse_constants(data["constants"], path)

    return CalcConfig(
        constants=constants,
        output=_parse_output(data.get("output", {}), path),
        source=path,
    )


def find_config(explicit: Path | None = None, cwd: Path | None = None) -> Path | None:
    """
    Locate the config file to use.

    Order: explicit path, $SIMPLECALC_CONFIG, ./simplecalc.toml.
    """
    if explicit is not None:
        return explicit

    env_path = os.environ.get(CONFIG_ENV_VAR, "")
    if env_path:
        return Path(env_path)

    candidate = (cwd or Path.cwd()) / CONFIG_FILENAME
    if candidate.exists():
        return candidate
    return None


def resolve_config(explicit: Path | None = None, cwd: Path | None = None) -> CalcConfig:
    path = find_config(explicit, cwd)
    if path is None:
        return CalcConfig()
    return load_config(path)


def parse_assignment_option(text: str) -> tuple[str, float]:
    """Parse a ``NAME=VALUE`` command-line override."""
    name, sep, raw_value = text.partition("=")
    name = name.strip()
    if not sep or not is_identifier(name):
        raise ConfigError(f"Expected NAME=VALUE with a valid identifier, got {text!r}")
    try:
        return name, float(raw_value)
    except ValueError as e:
        raise ConfigError(f"Value for {name!r} is not a number: {raw_value!r}") from e
