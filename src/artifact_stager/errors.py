"""Error types for artifact staging."""
from pathlib import Path
from typing import Any, Dict, Optional


class StageError(Exception):
    """Base error class for artifact staging."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class MissingSourceArtifactError(StageError):
    """A required source artifact does not exist."""

    def __init__(self, artifact: str, path: Path):
        super().__init__(
            f"Source artifact {artifact} not found at {path}",
            details={"artifact": artifact, "path": str(path)},
        )


class DirectoryCreationError(StageError):
    """Output directory could not be created."""

    def __init__(self, path: Path, reason: str):
        super().__init__(
            f"Failed to create output directory {path}: {reason}",
            details={"path": str(path), "reason": reason},
        )


class CopyFailureError(StageError):
    """Artifact copy could not complete."""

    def __init__(self, source: Path, destination: Path, reason: str):
        super().__init__(
            f"Failed to copy {source} to {destination}: {reason}",
            details={
                "source": str(source),
                "destination": str(destination),
                "reason": reason,
            },
        )
