"""Public split API (delegates to application use-cases)."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

from html_splitter.application.options import SplitOptions
from html_splitter.application.results import ExtractedAssets, SplitResult
from html_splitter.application.use_cases import extract_document, split_html_file


async def split_html_to_electron(
    input_path: Path | str,
    options: Optional[SplitOptions] = None,
) -> SplitResult:
    """Split a monolithic HTML file into an Electron application skeleton.

    The returned result carries ``success=False`` and an ``error`` message
    instead of raising.
    """
    return await split_html_file(Path(input_path), options)


def split_html_to_electron_sync(
    input_path: Path | str,
    options: Optional[SplitOptions] = None,
) -> SplitResult:
    """Blocking wrapper around :func:`split_html_to_electron`."""
    return asyncio.run(split_html_to_electron(input_path, options))


def inspect_html_file(
    input_path: Path | str,
    *,
    extract_all: bool = False,
) -> ExtractedAssets:
    """Validate and extract an HTML file without writing outputs.

    Raises
    ------
    NotFoundError
        If the file does not exist.
    InvalidInputError
        If the path is not a readable regular file.
    """
    return asyncio.run(extract_document(Path(input_path), extract_all=extract_all))
