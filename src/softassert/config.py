from __future__ import annotations

import sys
from pathlib import Path
from typing import Literal, TextIO

import yaml
from pydantic import BaseModel, ConfigDict, field_validator


class AssertSettings(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)
    stream: Literal["stdout", "stderr"] = "stdout"
    width: int = 80
    depth: int | None = None

    @field_validator("width")
    @classmethod
    def width_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("width must be positive")
        return v

    @field_validator("depth")
    @classmethod
    def depth_must_be_positive(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            raise ValueError("depth must be positive when set")
        return v

    def resolve_stream(self) -> TextIO:
        """Return the live ``sys`` stream, so output capture swaps are honoured."""
        return getattr(sys, self.stream)


def load_settings(path: Path) -> AssertSettings:
    """Load and validate assertion settings from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return AssertSettings()
    if not isinstance(raw, dict):
        raise ValueError(f"Expected a YAML mapping in {path}")

    return AssertSettings(**raw)
