"""Shared type aliases for splitter modules."""

from __future__ import annotations

from enum import Enum
from typing import Literal, TypeAlias

AssetKind: TypeAlias = Literal["style", "script"]


class PipelineStage(str, Enum):
    """Stages of one split invocation."""

    VALIDATING = "validating"
    EXTRACTING = "extracting"
    EMITTING = "emitting"
    PACKAGING = "packaging"
    DONE = "done"
    FAILED = "failed"
