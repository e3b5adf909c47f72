"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from html_splitter.application.options import SplitOptions
from html_splitter.application.ports import (
    AssetEmitter,
    AssetExtractor,
    InputValidator,
    OutputPackager,
)
from html_splitter.application.results import (
    ExtractedAssets,
    OutputManifest,
    SourceDocument,
    SplitResult,
)


def build_split_options(
    *,
    output_dir: Path | str | None = None,
    create_zip: bool = False,
    app_name: str | None = None,
    app_version: str = "1.0.0",
    extract_all: bool = False,
) -> SplitOptions:
    """Build typed split options via lazy use-case import."""
    from html_splitter.application.use_cases import build_split_options as _impl

    return _impl(
        output_dir=output_dir,
        create_zip=create_zip,
        app_name=app_name,
        app_version=app_version,
        extract_all=extract_all,
    )


async def split_html_file(
    input_path: Path,
    options: SplitOptions | None = None,
    *,
    validator: InputValidator | None = None,
    extractor: AssetExtractor | None = None,
    emitter: AssetEmitter | None = None,
    packager: OutputPackager | None = None,
) -> SplitResult:
    """Split an HTML document via lazy use-case import."""
    from html_splitter.application.use_cases import split_html_file as _impl

    return await _impl(
        input_path,
        options,
        validator=validator,
        extractor=extractor,
        emitter=emitter,
        packager=packager,
    )


__all__ = [
    "SplitOptions",
    "ExtractedAssets",
    "OutputManifest",
    "SourceDocument",
    "SplitResult",
    "build_split_options",
    "split_html_file",
]
