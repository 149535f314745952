"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, hoppath.toml only contains overrides.
A run with no config file reads ``conexoes.csv`` from the working directory
with no bounds on identifiers or vertex count.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator


class GraphConfig(BaseModel):
    """[graph] section."""

    model_config = {"frozen": True}

    edges_file: Path = Path("conexoes.csv")
    skip_header: bool = True
    max_vertices: int | None = Field(default=None, ge=0)
    min_id: int | None = None
    max_id: int | None = None

    @model_validator(mode="after")
    def _check_id_bounds(self) -> GraphConfig:
        if self.min_id is not None and self.max_id is not None and self.min_id > self.max_id:
            msg = f"min_id ({self.min_id}) must not exceed max_id ({self.max_id})"
            raise ValueError(msg)
        return self


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    separator: str = " -> "
