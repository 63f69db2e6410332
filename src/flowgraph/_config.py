"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path


class ConfigError(Exception):
    """Error in flowgraph configuration."""


@dataclass(slots=True, frozen=True)
class EngineConfig:
    """Engine settings, read from the ``[tool.flowgraph]`` table.

    Attributes:
        id_prefix: Prefix of ids generated by a GraphSession.
        max_eval_depth: Maximum nesting depth of one evaluation, or None for
            no limit.

    """

    id_prefix: str = "N"
    max_eval_depth: int | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    if start_dir is None:
        start_dir = Path.cwd()

    current = start_dir.resolve()

    while True:
        candidate = current / "pyproject.toml"
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_id_prefix(value: object) -> str:
    if not isinstance(value, str) or not value:
        msg = "Invalid [tool.flowgraph].id_prefix: expected a non-empty string"
        raise ConfigError(msg)
    return value


def _parse_max_eval_depth(value: object) -> int:
    # bool is a subclass of int, and `true` is not a depth
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        msg = "Invalid [tool.flowgraph].max_eval_depth: expected a positive integer"
        raise ConfigError(msg)
    return value


def load_config(pyproject_path: Path) -> EngineConfig:
    """Load and validate [tool.flowgraph] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed EngineConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("flowgraph", {})
    if not isinstance(section, dict):
        msg = "Invalid [tool.flowgraph]: expected a table"
        raise ConfigError(msg)

    unknown = set(section) - {"id_prefix", "max_eval_depth"}
    if unknown:
        msg = f"Unknown [tool.flowgraph] keys: {', '.join(sorted(unknown))}"
        raise ConfigError(msg)

    defaults = EngineConfig()
    return EngineConfig(
        id_prefix=_parse_id_prefix(section["id_prefix"]) if "id_prefix" in section else defaults.id_prefix,
        max_eval_depth=(
            _parse_max_eval_depth(section["max_eval_depth"])
            if "max_eval_depth" in section
            else defaults.max_eval_depth
        ),
    )


def get_config() -> EngineConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        EngineConfig (defaults if no pyproject.toml or no [tool.flowgraph] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return EngineConfig()
    return load_config(pyproject_path)
