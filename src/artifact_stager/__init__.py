"""Staging of executor server binaries ahead of packaging."""

from artifact_stager.types import (
    StageConfig,
    StagedArtifact,
    StageResult,
    DEFAULT_CONFIG,
)
from artifact_stager.stager import prebuild, stage_artifacts, ensure_output_dir
from artifact_stager.errors import (
    StageError,
    MissingSourceArtifactError,
    DirectoryCreationError,
    CopyFailureError,
)

__version__ = "0.1.0"

__all__ = [
    # Types
    "StageConfig",
    "StagedArtifact",
    "StageResult",
    "DEFAULT_CONFIG",

    # Staging
    "prebuild",
    "stage_artifacts",
    "ensure_output_dir",

    # Error types
    "StageError",
    "MissingSourceArtifactError",
    "DirectoryCreationError",
    "CopyFailureError",
]
