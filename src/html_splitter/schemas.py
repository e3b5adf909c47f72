"""Pydantic schemas for runtime validation of split inputs."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

DEFAULT_APP_NAME = "electron-app"
DEFAULT_APP_VERSION = "1.0.0"
DEFAULT_DIR_SUFFIX = "-app"

_NAME_INVALID_CHARS = re.compile(r"[^a-z0-9._-]+")


def derive_app_name(output_dir: Path) -> str:
    """Derive a package-safe application name from the output directory name."""
    name = output_dir.name
    if name in ("", ".."):
        name = output_dir.resolve().name
    slug = _NAME_INVALID_CHARS.sub("-", name.lower()).strip("-._")
    return slug or DEFAULT_APP_NAME


def default_output_dir(input_path: Path) -> Path:
    """Return the output directory used when none is given: the input stem, beside it.

    An input without a suffix would collide with its own stem, so it gets
    ``<name>-app`` instead.
    """
    if input_path.stem == input_path.name:
        return input_path.parent / f"{input_path.name}{DEFAULT_DIR_SUFFIX}"
    return input_path.parent / input_path.stem


class SplitConfig(BaseModel):
    """Validated, fully resolved configuration for one split invocation."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_path: Path
    output_dir: Path
    create_zip: bool = False
    app_name: str | None = None
    app_version: str = DEFAULT_APP_VERSION
    extract_all: bool = False

    @field_validator("app_name")
    @classmethod
    def _validate_app_name(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not value:
            raise ValueError("app_name cannot be blank.")
        return value

    @field_validator("app_version")
    @classmethod
    def _validate_app_version(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("app_version cannot be blank.")
        return value

    @model_validator(mode="before")
    @classmethod
    def _fill_app_name(cls, data: object) -> object:
        if isinstance(data, dict) and data.get("app_name") is None:
            output_dir = data.get("output_dir")
            if output_dir is not None:
                data = {**data, "app_name": derive_app_name(Path(output_dir))}
        return data
