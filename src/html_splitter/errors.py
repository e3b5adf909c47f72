"""Error taxonomy for the HTML splitting pipeline."""

from __future__ import annotations

from pathlib import Path


class SplitterError(Exception):
    """Base class for pipeline failures surfaced to callers."""

    exit_code: int = 1


class NotFoundError(SplitterError):
    """Input path does not exist."""

    exit_code = 2


class InvalidInputError(SplitterError):
    """Input exists but cannot be used (not a readable regular file, bad options)."""

    exit_code = 2


class WriteError(SplitterError):
    """An output file could not be written."""

    def __init__(self, target: Path, reason: str) -> None:
        self.target = target
        super().__init__(f"Failed to write {target}: {reason}")


class PackagingError(SplitterError):
    """Archive creation failed or there was nothing to archive."""
