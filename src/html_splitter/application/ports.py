"""Application ports for the split pipeline stages."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from html_splitter.application.results import (
    ExtractedAssets,
    OutputManifest,
    SourceDocument,
)


class InputValidator(Protocol):
    """Validate and load the input document."""

    def validate(self, input_path: Path) -> None:
        """Raise if the path is not a readable regular file."""

    def read(self, input_path: Path) -> SourceDocument:
        """Read the validated document."""


class AssetExtractor(Protocol):
    """Split inline style/script content out of markup."""

    def extract(self, text: str, *, extract_all: bool = False) -> ExtractedAssets:
        """Return extracted assets; must not raise on malformed markup."""


class AssetEmitter(Protocol):
    """Write extracted assets and scaffold files."""

    async def emit(
        self,
        assets: ExtractedAssets,
        *,
        output_dir: Path,
        app_name: str,
        app_version: str,
    ) -> OutputManifest:
        """Write outputs and return their paths."""


class OutputPackager(Protocol):
    """Archive the emitted output directory."""

    async def package(self, output_dir: Path) -> Path:
        """Return the archive path."""
