"""Emitter writing extracted assets and scaffold files to the output directory."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from html_splitter.adapters.extractor import SCRIPT_FILENAME, STYLESHEET_FILENAME
from html_splitter.adapters.scaffold import (
    ENTRY_SCRIPT_FILENAME,
    HTML_FILENAME,
    MANIFEST_FILENAME,
    render_entry_script,
    render_manifest,
)
from html_splitter.application.results import ExtractedAssets, OutputManifest
from html_splitter.errors import WriteError

logger = logging.getLogger(__name__)


def ensure_output_dir(output_dir: Path) -> None:
    """Create ``output_dir`` (and parents) if missing."""
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError(output_dir, str(exc)) from exc
    if not output_dir.is_dir():
        raise WriteError(output_dir, "output path exists and is not a directory")


def write_text_file(path: Path, content: str) -> Path:
    """Write ``content`` to ``path``, replacing any existing file."""
    try:
        with path.open(
            "w", encoding="utf-8", errors="surrogateescape", newline=""
        ) as handle:
            handle.write(content)
    except OSError as exc:
        raise WriteError(path, str(exc)) from exc
    logger.debug("wrote %s (%d chars)", path, len(content))
    return path


class FileAssetEmitter:
    """Write the generated application skeleton to disk.

    Blocking filesystem calls run in worker threads; each write is awaited
    before the next starts.
    """

    async def emit(
        self,
        assets: ExtractedAssets,
        *,
        output_dir: Path,
        app_name: str,
        app_version: str,
    ) -> OutputManifest:
        """Write all output files and return the manifest of written paths.

        Parameters
        ----------
        assets : ExtractedAssets
            Extractor output.
        output_dir : Path
            Destination directory, created if missing.
        app_name : str
            Application name used by ``main.js`` and ``package.json``.
        app_version : str
            Version recorded in ``package.json``.

        Raises
        ------
        WriteError
            If the directory or any file cannot be written.
        """
        await asyncio.to_thread(ensure_output_dir, output_dir)

        stylesheet_path: Path | None = None
        script_path: Path | None = None
        if assets.style_text is not None:
            stylesheet_path = await asyncio.to_thread(
                write_text_file, output_dir / STYLESHEET_FILENAME, assets.style_text
            )
        if assets.script_text is not None:
            script_path = await asyncio.to_thread(
                write_text_file, output_dir / SCRIPT_FILENAME, assets.script_text
            )
        html_path = await asyncio.to_thread(
            write_text_file, output_dir / HTML_FILENAME, assets.markup
        )
        entry_script_path = await asyncio.to_thread(
            write_text_file,
            output_dir / ENTRY_SCRIPT_FILENAME,
            render_entry_script(app_name),
        )
        manifest_path = await asyncio.to_thread(
            write_text_file,
            output_dir / MANIFEST_FILENAME,
            render_manifest(app_name, app_version),
        )
        return OutputManifest(
            output_dir=output_dir,
            html_path=html_path,
            entry_script_path=entry_script_path,
            manifest_path=manifest_path,
            stylesheet_path=stylesheet_path,
            script_path=script_path,
        )
