"""Core type definitions"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StageConfig:
    """What to stage and where"""
    output_dir_name: str = "file"
    artifacts: tuple[str, ...] = ("executorserver", "executorserver.exe")
    verify: bool = False


@dataclass(frozen=True)
class StagedArtifact:
    """A single artifact copied into the output directory"""
    name: str
    source: Path
    destination: Path
    size: int
    sha256: str | None = None


@dataclass(frozen=True)
class StageResult:
    """Outcome of one staging run"""
    id: str
    working_dir: Path
    output_dir: Path
    created_output_dir: bool
    artifacts: tuple[StagedArtifact, ...]

    @property
    def destinations(self) -> list[Path]:
        return [a.destination for a in self.artifacts]


DEFAULT_CONFIG = StageConfig()
