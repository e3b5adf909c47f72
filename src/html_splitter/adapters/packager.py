"""Zip packaging of the emitted output directory."""

from __future__ import annotations

import asyncio
import logging
import zipfile
from pathlib import Path

from html_splitter.errors import PackagingError

logger = logging.getLogger(__name__)

ARCHIVE_SUFFIX = ".zip"


def archive_path_for(output_dir: Path) -> Path:
    """Return ``<output_dir>.zip``, placed beside the directory."""
    if output_dir.name in ("", ".."):
        output_dir = output_dir.resolve()
    return output_dir.with_name(output_dir.name + ARCHIVE_SUFFIX)


def collect_files(output_dir: Path) -> list[Path]:
    """List regular files under ``output_dir`` in a stable order."""
    if not output_dir.is_dir():
        raise PackagingError(f"Output directory does not exist: {output_dir}")
    files = sorted(path for path in output_dir.rglob("*") if path.is_file())
    if not files:
        raise PackagingError(f"Nothing to archive: {output_dir} is empty")
    return files


def create_archive(output_dir: Path) -> Path:
    """Archive every file in ``output_dir`` into ``<output_dir>.zip``.

    Entry names are paths relative to ``output_dir``.

    Raises
    ------
    PackagingError
        If the directory is missing or empty, or the archive cannot be written.
    """
    files = collect_files(output_dir)
    archive_path = archive_path_for(output_dir)
    try:
        with zipfile.ZipFile(archive_path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
            for path in files:
                zf.write(path, arcname=path.relative_to(output_dir).as_posix())
    except (OSError, zipfile.BadZipFile) as exc:
        raise PackagingError(f"Failed to create archive {archive_path}: {exc}") from exc
    logger.info("archived %d files into %s", len(files), archive_path)
    return archive_path


class ZipPackager:
    """Default packager producing a DEFLATE zip archive."""

    async def package(self, output_dir: Path) -> Path:
        """Archive ``output_dir`` off the event loop."""
        return await asyncio.to_thread(create_archive, output_dir)
