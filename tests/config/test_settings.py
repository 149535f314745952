"""Tests for HoppathSettings: CLI flags, env vars, and TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest
from click.testing import CliRunner
from pydantic import ValidationError

from hoppath.cli import cli
from hoppath.config.settings import (
    CONFIG_ENV_VAR,
    CONFIG_FILENAME,
    HoppathSettings,
    locate_config,
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in (
        "HOPPATH_CONFIG",
        "HOPPATH_EDGES_FILE",
        "HOPPATH_GRAPH__MAX_VERTICES",
        "HOPPATH_GRAPH__EDGES_FILE",
        "HOPPATH_QUIET",
    ):
        monkeypatch.delenv(var, raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = HoppathSettings.from_cli(base_dir=tmp_path)
        assert settings.base_dir == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.graph.max_vertices is None
        assert settings.graph.skip_header is True
        assert settings.output.separator == " -> "
        assert settings.edges_path == tmp_path / "conexoes.csv"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = HoppathSettings.from_cli(base_dir=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_sections(self, tmp_path: Path) -> None:
        (tmp_path / "hoppath.toml").write_text(
            '[graph]\nedges_file = "data/links.csv"\nmax_vertices = 20000\n'
            "min_id = 0\nmax_id = 499999\n"
            '[output]\nseparator = " => "\n'
        )
        settings = HoppathSettings.from_cli(base_dir=tmp_path)
        assert settings.config_path == (tmp_path / "hoppath.toml").resolve()
        assert settings.graph.max_vertices == 20000
        assert settings.graph.max_id == 499999
        assert settings.output.separator == " => "
        assert settings.edges_path == tmp_path / "data" / "links.csv"

    def test_discovered_by_walk_up(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "hoppath.toml").write_text("[graph]\nmax_vertices = 5\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        monkeypatch.chdir(nested)
        settings = HoppathSettings.from_cli()
        assert settings.graph.max_vertices == 5
        assert settings.base_dir == tmp_path.resolve()
        assert settings.edges_path == tmp_path.resolve() / "conexoes.csv"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text("[graph]\nskip_header = false\n")
        settings = HoppathSettings.from_cli(config_path=str(cfg), base_dir=tmp_path)
        assert settings.graph.skip_header is False

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "hoppath.toml").write_text("[graph\n")
        with pytest.raises(click.ClickException):
            HoppathSettings.from_cli(base_dir=tmp_path)

    def test_inverted_bounds_reported(self, tmp_path: Path) -> None:
        (tmp_path / "hoppath.toml").write_text("[graph]\nmin_id = 10\nmax_id = 1\n")
        expected = r"min_id \(10\) must not exceed max_id \(1\)"
        with pytest.raises(click.ClickException, match=expected):
            HoppathSettings.from_cli(base_dir=tmp_path)

    def test_negative_capacity_reported(self, tmp_path: Path) -> None:
        (tmp_path / "hoppath.toml").write_text("[graph]\nmax_vertices = -1\n")
        with pytest.raises(click.ClickException, match="graph.max_vertices"):
            HoppathSettings.from_cli(base_dir=tmp_path)

    def test_absolute_edges_file(self, tmp_path: Path) -> None:
        target = tmp_path / "elsewhere.csv"
        (tmp_path / "hoppath.toml").write_text(f'[graph]\nedges_file = "{target.as_posix()}"\n')
        settings = HoppathSettings.from_cli(base_dir=tmp_path)
        assert settings.edges_path == target


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "hoppath.toml").write_text("[graph]\nmax_vertices = 5\n")
        monkeypatch.setenv("HOPPATH_GRAPH__MAX_VERTICES", "9")
        settings = HoppathSettings.from_cli(base_dir=tmp_path)
        assert settings.graph.max_vertices == 9

    def test_cli_flag_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOPPATH_QUIET", "false")
        settings = HoppathSettings.from_cli(base_dir=tmp_path, quiet=True)
        assert settings.quiet is True

    def test_edges_file_flag_is_cwd_relative(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "hoppath.toml").write_text('[graph]\nedges_file = "from_toml.csv"\n')
        sub = tmp_path / "sub"
        sub.mkdir()
        monkeypatch.chdir(sub)
        settings = HoppathSettings.from_cli(edges_file="mine.csv")
        assert settings.edges_path == (sub / "mine.csv").resolve()

    def test_non_integer_env_bound_reported(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("HOPPATH_GRAPH__MAX_VERTICES", "lots")
        with pytest.raises(click.ClickException, match="max_vertices"):
            HoppathSettings.from_cli(base_dir=tmp_path)


class TestLocateConfig:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        cfg = tmp_path / CONFIG_FILENAME
        cfg.write_text("")
        assert locate_config(start=tmp_path) == cfg.resolve()

    def test_nearest_ancestor_wins(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        inner = tmp_path / "x"
        deep = inner / "y"
        deep.mkdir(parents=True)
        (inner / CONFIG_FILENAME).write_text("")
        assert locate_config(start=deep) == (inner / CONFIG_FILENAME).resolve()

    def test_none_when_absent(self, tmp_path: Path) -> None:
        deep = tmp_path / "a"
        deep.mkdir()
        found = locate_config(start=deep)
        assert found is None or not found.is_relative_to(tmp_path)

    def test_env_var_beats_walk_up(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        other = tmp_path / "other.toml"
        other.write_text("")
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(other))
        assert locate_config(start=tmp_path) == other

    def test_explicit_path_beats_env_var(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        explicit = tmp_path / "explicit.toml"
        explicit.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "env.toml"))
        assert locate_config(str(explicit), tmp_path) == explicit

    def test_override_pointing_nowhere(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert locate_config(start=tmp_path) is None


class TestCliReporting:
    def test_inverted_bounds_exit_cleanly(
        self, cli_runner: CliRunner, workdir: Path, diamond_csv: Path
    ) -> None:
        (workdir / CONFIG_FILENAME).write_text("[graph]\nmin_id = 10\nmax_id = 1\n")
        result = cli_runner.invoke(cli, ["path", "1", "3"])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "Traceback" not in result.output
        assert "must not exceed max_id" in result.output
