"""Input validation and document loading."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from html_splitter.application.results import SourceDocument
from html_splitter.errors import InvalidInputError, NotFoundError


def validate_input_path(input_path: Path) -> None:
    """Check that ``input_path`` is an existing, readable regular file.

    Parameters
    ----------
    input_path : Path
        Candidate input document.

    Raises
    ------
    NotFoundError
        If nothing exists at ``input_path``.
    InvalidInputError
        If the entry is not a regular file or cannot be read.
    """
    try:
        info = input_path.stat()
    except FileNotFoundError as exc:
        raise NotFoundError(f"Input file not found: {input_path}") from exc
    except OSError as exc:
        raise InvalidInputError(f"Cannot stat input path {input_path}: {exc}") from exc

    if stat.S_ISDIR(info.st_mode):
        raise InvalidInputError(f"Input path is a directory, not a file: {input_path}")
    if not stat.S_ISREG(info.st_mode):
        raise InvalidInputError(f"Input path is not a regular file: {input_path}")
    if not os.access(input_path, os.R_OK):
        raise InvalidInputError(f"Input file is not readable: {input_path}")


def read_source_document(input_path: Path) -> SourceDocument:
    """Read the input document as UTF-8 text.

    Undecodable bytes are kept as surrogate escapes so they can be written
    back unchanged.
    """
    try:
        with input_path.open(
            encoding="utf-8", errors="surrogateescape", newline=""
        ) as handle:
            text = handle.read()
    except OSError as exc:
        raise InvalidInputError(f"Failed to read {input_path}: {exc}") from exc
    return SourceDocument(path=input_path.resolve(), text=text)


class FileInputValidator:
    """Default filesystem-backed validator/reader."""

    def validate(self, input_path: Path) -> None:
        """Validate that the input path points to a readable file."""
        validate_input_path(input_path)

    def read(self, input_path: Path) -> SourceDocument:
        """Load the input document."""
        return read_source_document(input_path)
