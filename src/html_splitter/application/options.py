"""Typed option objects shared across split use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SplitOptions:
    """Caller-facing options for one split invocation.

    ``output_dir`` defaults to the input filename stem beside the input file
    and ``app_name`` to a slug of the output directory name.
    """

    output_dir: Path | None = None
    create_zip: bool = False
    app_name: str | None = None
    app_version: str = "1.0.0"
    extract_all: bool = False
