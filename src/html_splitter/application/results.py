"""Application-layer value objects produced by the split pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from html_splitter.types import PipelineStage


@dataclass(frozen=True)
class SourceDocument:
    """Raw input document and its resolved path."""

    path: Path
    text: str


@dataclass(frozen=True)
class ExtractedAssets:
    """Extractor output: moved-out asset text plus the rewritten markup."""

    markup: str
    style_text: str | None = None
    script_text: str | None = None
    style_blocks: int = 0
    script_blocks: int = 0


@dataclass(frozen=True)
class OutputManifest:
    """Files written by one successful invocation."""

    output_dir: Path
    html_path: Path
    entry_script_path: Path
    manifest_path: Path
    stylesheet_path: Path | None = None
    script_path: Path | None = None
    archive_path: Path | None = None

    def paths(self) -> list[Path]:
        """Return every written path, in write order."""
        candidates = [
            self.stylesheet_path,
            self.script_path,
            self.html_path,
            self.entry_script_path,
            self.manifest_path,
            self.archive_path,
        ]
        return [path for path in candidates if path is not None]


@dataclass(frozen=True)
class SplitResult:
    """Structured outcome of a split invocation.

    ``stage`` is the terminal state (``DONE`` or ``FAILED``); on failure
    ``failed_stage`` names the stage that aborted the pipeline.
    """

    success: bool
    stage: PipelineStage
    files: OutputManifest | None = None
    error: str | None = None
    error_type: str | None = None
    failed_stage: PipelineStage | None = None
