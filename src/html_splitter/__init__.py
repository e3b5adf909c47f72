"""Split monolithic HTML documents into Electron application skeletons."""

from __future__ import annotations

from pathlib import Path

from html_splitter.application.options import SplitOptions
from html_splitter.application.results import OutputManifest, SplitResult

__version__ = "0.1.0"


async def split_html_to_electron(
    input_path: Path | str,
    options: SplitOptions | None = None,
) -> SplitResult:
    """Split an HTML document into separate stylesheet, script and shell files.

    Parameters
    ----------
    input_path : Path | str
        Monolithic HTML document with inline ``<style>``/``<script>`` blocks.
    options : SplitOptions, optional
        Output directory, archive toggle and manifest fields. Defaults write
        to a directory named after the input stem, beside the input file.

    Returns
    -------
    SplitResult
        ``success`` with the written files, or ``success=False`` with an
        error message. Never raises.
    """
    from .api import split_html_to_electron as _impl

    return await _impl(input_path, options)


def split_html_to_electron_sync(
    input_path: Path | str,
    options: SplitOptions | None = None,
) -> SplitResult:
    """Run :func:`split_html_to_electron` to completion from synchronous code.

    Parameters
    ----------
    input_path : Path | str
        Monolithic HTML document.
    options : SplitOptions, optional
        Split options.

    Returns
    -------
    SplitResult
        Outcome of the split.
    """
    from .api import split_html_to_electron_sync as _impl

    return _impl(input_path, options)


__all__ = [
    "OutputManifest",
    "SplitOptions",
    "SplitResult",
    "split_html_to_electron",
    "split_html_to_electron_sync",
]
