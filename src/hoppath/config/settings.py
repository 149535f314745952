"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs (CLI flags passed by Click)
  2. Env vars (``HOPPATH_*`` prefix, ``__`` for nested sections)
  3. TOML file (``hoppath.toml`` discovered via walk-up)
  4. Code defaults baked into the section models
"""

from __future__ import annotations

import os
import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from hoppath.config.models import GraphConfig, OutputConfig


CONFIG_FILENAME = "hoppath.toml"
CONFIG_ENV_VAR = "HOPPATH_CONFIG"


def locate_config(config_path: str | None = None, start: Path | None = None) -> Path | None:
    """The ``hoppath.toml`` in effect for this run, or None.

    An explicit *config_path* (``--config``) wins, then ``HOPPATH_CONFIG``,
    then the nearest ``hoppath.toml`` in *start* (default: cwd) or one of its
    ancestors.  An override naming a missing file means "no config file".
    """
    override = config_path or os.environ.get(CONFIG_ENV_VAR)
    if override:
        candidate = Path(override)
        return candidate if candidate.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        if (directory / CONFIG_FILENAME).is_file():
            return directory / CONFIG_FILENAME
    return None


def _describe(exc: ValidationError) -> str:
    """One ``section.field: message`` line per validation error."""
    lines = []
    for error in exc.errors():
        where = ".".join(str(part) for part in error["loc"]) or "settings"
        lines.append(f"  {where}: {error['msg']}")
    return "\n".join(lines)


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``hoppath.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            try:
                self._data = tomllib.loads(toml_path.read_text(encoding="utf-8"))
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.ClickException(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# The TOML path has to reach settings_customise_sources (a classmethod)
# during construction; it is parked here for the duration of from_cli().
_tls = threading.local()


class HoppathSettings(BaseSettings):
    """Settings for one hoppath invocation, frozen after construction.

    Attributes:
        base_dir: Directory that relative ``[graph] edges_file`` paths are
            resolved against (the config file's parent, or CWD).
        config_path: The TOML file that was loaded, if any.
        edges_file: ``--edges-file`` override, already absolute.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "HOPPATH_",
        "env_nested_delimiter": "__",
    }

    base_dir: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None
    edges_file: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    no_interact: bool = False

    # --- TOML sections ---
    graph: GraphConfig = Field(default_factory=GraphConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @property
    def edges_path(self) -> Path:
        """The edge file to load: CLI override first, then ``[graph] edges_file``."""
        if self.edges_file is not None:
            return self.edges_file
        if self.graph.edges_file.is_absolute():
            return self.graph.edges_file
        return self.base_dir / self.graph.edges_file

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        base_dir: Path | None = None,
        edges_file: str | Path | None = None,
        **cli_flags: Any,
    ) -> HoppathSettings:
        """Construct settings from a CLI invocation.

        Locates ``hoppath.toml`` (see :func:`locate_config`) and resolves
        *base_dir* from the config file's parent directory.  A relative
        *edges_file* is taken relative to the current directory.

        Raises:
            click.ClickException: the TOML is unparsable or a value fails
                validation (e.g. ``min_id`` above ``max_id``).
        """
        toml_path = locate_config(config_path, base_dir)

        resolved_dir = base_dir
        if resolved_dir is None:
            resolved_dir = toml_path.parent if toml_path else Path.cwd()

        overrides: dict[str, Any] = dict(cli_flags)
        if edges_file is not None:
            overrides["edges_file"] = Path(edges_file).resolve()

        _tls.toml_path = toml_path
        try:
            return cls(base_dir=resolved_dir, config_path=toml_path, **overrides)
        except ValidationError as exc:
            source = f" (config file: {toml_path})" if toml_path else ""
            msg = f"Invalid settings{source}:\n{_describe(exc)}"
            raise click.ClickException(msg) from exc
        finally:
            _tls.toml_path = None
