"""Tests for the configuration module."""

from pathlib import Path

import pytest

from graphwalk._cli.config import (
    ConfigError,
    GraphwalkConfig,
    find_pyproject_toml,
    get_config,
    load_config,
)


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        result = find_pyproject_toml(tmp_path)

        assert result == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        subdir = tmp_path / "src" / "pkg"
        subdir.mkdir(parents=True)

        result = find_pyproject_toml(subdir)

        assert result == pyproject

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        """Should return None when no pyproject.toml is found."""
        result = find_pyproject_toml(tmp_path)

        assert result is None


class TestLoadConfig:
    """Tests for loading the [tool.graphwalk] table."""

    def test_all_keys(self, tmp_path: Path) -> None:
        """Should parse every supported key."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.graphwalk]
vertex_count = 4
edge_count = 3
directed = true
separate_batches = true
""",
        )

        config = load_config(pyproject)

        assert config.vertex_count == 4
        assert config.edge_count == 3
        assert config.directed is True
        assert config.separate_batches is True
        assert config.project_root == tmp_path

    def test_missing_section_gives_defaults(self, tmp_path: Path) -> None:
        """Should fall back to ten vertices and five edges."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        config = load_config(pyproject)

        assert config.vertex_count == 10
        assert config.edge_count == 5
        assert config.directed is False
        assert config.separate_batches is False

    def test_partial_section(self, tmp_path: Path) -> None:
        """Unset keys keep their defaults."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.graphwalk]\ndirected = true\n")

        config = load_config(pyproject)

        assert config.directed is True
        assert config.vertex_count == 10

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Should raise ConfigError for malformed TOML."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.graphwalk\n")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)

    def test_negative_vertex_count(self, tmp_path: Path) -> None:
        """Should reject negative counts."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.graphwalk]\nvertex_count = -1\n")

        with pytest.raises(ConfigError, match="vertex_count"):
            load_config(pyproject)

    def test_wrong_type(self, tmp_path: Path) -> None:
        """Should reject values of the wrong type."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.graphwalk]\nedge_count = "many"\n')

        with pytest.raises(ConfigError, match="edge_count"):
            load_config(pyproject)

    def test_unknown_key(self, tmp_path: Path) -> None:
        """Should reject keys it does not know."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.graphwalk]\nvertices = 3\n")

        with pytest.raises(ConfigError, match="vertices"):
            load_config(pyproject)

    def test_section_not_a_table(self, tmp_path: Path) -> None:
        """Should reject a non-table [tool.graphwalk] value."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool]\ngraphwalk = "yes"\n')

        with pytest.raises(ConfigError, match="expected a table"):
            load_config(pyproject)


class TestGetConfig:
    """Tests for get_config."""

    def test_defaults_without_pyproject(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr("graphwalk._cli.config.find_pyproject_toml", lambda: None)

        assert get_config() == GraphwalkConfig()

    def test_reads_from_working_directory(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "pyproject.toml").write_text("[tool.graphwalk]\nvertex_count = 3\n")
        monkeypatch.chdir(tmp_path)

        assert get_config().vertex_count == 3
