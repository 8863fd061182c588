"""Configuration loading from pyproject.toml."""

import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class ConfigError(Exception):
    """Error in graphwalk configuration."""


class GraphwalkConfig(BaseModel):
    """Configuration loaded from the ``[tool.graphwalk]`` table of pyproject.toml.

    Defaults reproduce the classic exercise: ten vertices and five edges.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    vertex_count: int = Field(default=10, ge=0, description="Number of vertices")
    edge_count: int = Field(default=5, ge=0, description="Number of edges per batch")
    directed: bool = Field(default=False, description="Insert edges one way only")
    separate_batches: bool = Field(
        default=False,
        description="Read one edge batch for the matrix and another for the list",
    )
    project_root: Path | None = Field(default=None, exclude=True)


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
            # Reached filesystem root
            return None
        current = parent


def load_config(pyproject_path: Path) -> GraphwalkConfig:
    """Load and validate [tool.graphwalk] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed GraphwalkConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("graphwalk", {})
    if not isinstance(section, dict):
        msg = "Invalid [tool.graphwalk] configuration: expected a table"
        raise ConfigError(msg)

    try:
        return GraphwalkConfig.model_validate({**section, "project_root": project_root})
    except ValidationError as e:
        errors = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in e.errors())
        msg = f"Invalid [tool.graphwalk] configuration: {errors}"
        raise ConfigError(msg) from e


def get_config() -> GraphwalkConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        GraphwalkConfig (defaults if no pyproject.toml or no [tool.graphwalk] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return GraphwalkConfig()
    return load_config(pyproject_path)
