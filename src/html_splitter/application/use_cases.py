"""Application use-case orchestrating the split pipeline."""

from __future__ import annotations

import asyncio
import dataclasses
import logging
from pathlib import Path

from pydantic import ValidationError

from html_splitter.adapters.emitter import FileAssetEmitter
from html_splitter.adapters.extractor import TagScanExtractor
from html_splitter.adapters.packager import ZipPackager
from html_splitter.adapters.validators import FileInputValidator
from html_splitter.application.options import SplitOptions
from html_splitter.application.ports import (
    AssetEmitter,
    AssetExtractor,
    InputValidator,
    OutputPackager,
)
from html_splitter.application.results import ExtractedAssets, SplitResult
from html_splitter.errors import InvalidInputError, SplitterError
from html_splitter.schemas import (
    DEFAULT_APP_NAME,
    SplitConfig,
    default_output_dir,
)
from html_splitter.types import PipelineStage

logger = logging.getLogger(__name__)


def build_split_options(
    *,
    output_dir: Path | str | None = None,
    create_zip: bool = False,
    app_name: str | None = None,
    app_version: str = "1.0.0",
    extract_all: bool = False,
) -> SplitOptions:
    """Build typed option object from command/API params."""
    return SplitOptions(
        output_dir=Path(output_dir) if output_dir is not None else None,
        create_zip=create_zip,
        app_name=app_name,
        app_version=app_version,
        extract_all=extract_all,
    )


def resolve_config(input_path: Path, options: SplitOptions) -> SplitConfig:
    """Apply defaults to ``options`` and validate them."""
    try:
        return SplitConfig(
            input_path=input_path,
            output_dir=options.output_dir or default_output_dir(input_path),
            create_zip=options.create_zip,
            app_name=options.app_name,
            app_version=options.app_version,
            extract_all=options.extract_all,
        )
    except ValidationError as exc:
        raise InvalidInputError(f"Invalid split options: {exc}") from exc


def _failure(stage: PipelineStage, exc: Exception) -> SplitResult:
    return SplitResult(
        success=False,
        stage=PipelineStage.FAILED,
        error=f"{type(exc).__name__}: {exc}",
        error_type=type(exc).__name__,
        failed_stage=stage,
    )


async def extract_document(
    input_path: Path,
    *,
    extract_all: bool = False,
    validator: InputValidator | None = None,
    extractor: AssetExtractor | None = None,
) -> ExtractedAssets:
    """Use-case: validate and extract without writing anything."""
    validator = validator or FileInputValidator()
    extractor = extractor or TagScanExtractor()

    await asyncio.to_thread(validator.validate, input_path)
    document = await asyncio.to_thread(validator.read, input_path)
    return extractor.extract(document.text, extract_all=extract_all)


async def split_html_file(
    input_path: Path,
    options: SplitOptions | None = None,
    *,
    validator: InputValidator | None = None,
    extractor: AssetExtractor | None = None,
    emitter: AssetEmitter | None = None,
    packager: OutputPackager | None = None,
) -> SplitResult:
    """Use-case: split one HTML document into an application skeleton.

    Stages run strictly in order: validating, extracting, emitting and,
    when requested, packaging. The first failure ends the run. Errors are
    returned in the result, never raised.
    """
    options = options or SplitOptions()
    validator = validator or FileInputValidator()
    extractor = extractor or TagScanExtractor()
    emitter = emitter or FileAssetEmitter()
    packager = packager or ZipPackager()

    stage = PipelineStage.VALIDATING
    try:
        logger.debug("stage=%s input=%s", stage.value, input_path)
        config = resolve_config(input_path, options)
        await asyncio.to_thread(validator.validate, config.input_path)
        document = await asyncio.to_thread(validator.read, config.input_path)

        stage = PipelineStage.EXTRACTING
        logger.debug("stage=%s chars=%d", stage.value, len(document.text))
        assets = extractor.extract(document.text, extract_all=config.extract_all)

        stage = PipelineStage.EMITTING
        logger.debug("stage=%s output_dir=%s", stage.value, config.output_dir)
        manifest = await emitter.emit(
            assets,
            output_dir=config.output_dir,
            app_name=config.app_name or DEFAULT_APP_NAME,
            app_version=config.app_version,
        )

        if config.create_zip:
            stage = PipelineStage.PACKAGING
            logger.debug("stage=%s", stage.value)
            archive_path = await packager.package(config.output_dir)
            manifest = dataclasses.replace(manifest, archive_path=archive_path)
    except SplitterError as exc:
        logger.debug("split failed during %s: %s", stage.value, exc)
        return _failure(stage, exc)
    except Exception as exc:
        logger.exception("unexpected error while splitting %s", input_path)
        return _failure(stage, exc)

    logger.info(
        "split %s into %s (%d files)",
        document.path,
        manifest.output_dir,
        len(manifest.paths()),
    )
    return SplitResult(success=True, stage=PipelineStage.DONE, files=manifest)
