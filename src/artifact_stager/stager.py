"""Staging of prebuilt executor server binaries for packaging."""
from pathlib import Path

from fuuid import b58_fuuid

from artifact_stager.errors import DirectoryCreationError
from artifact_stager.logging import get_logger
from artifact_stager.types import DEFAULT_CONFIG, StageConfig, StageResult
from artifact_stager.utils.fs import copy_artifact

logger = get_logger(__name__)


def ensure_output_dir(output_dir: Path) -> bool:
    """Create output_dir if missing. Returns True when it was created.

    Creation is single level: a missing parent is an error, not something
    to fill in.
    """
    if output_dir.exists():
        return False

    try:
        output_dir.mkdir()
    except OSError as e:
        raise DirectoryCreationError(output_dir, e.strerror or str(e)) from e

    return True


async def stage_artifacts(
    working_dir: Path, config: StageConfig = DEFAULT_CONFIG
) -> StageResult:
    """Copy the configured artifacts from working_dir into its output directory.

    Artifacts are copied one at a time in config order. A failure stops the
    run where it happened; earlier copies are left in place.
    """
    working_dir = Path(working_dir)
    output_dir = working_dir / config.output_dir_name
    run_id = b58_fuuid()
    log = logger.bind(run_id=run_id)

    log.debug(
        "stage_started",
        working_dir=str(working_dir),
        output_dir=str(output_dir),
        artifacts=list(config.artifacts),
    )

    created = ensure_output_dir(output_dir)
    if created:
        log.info("output_dir_created", path=str(output_dir))

    staged = []
    for name in config.artifacts:
        artifact = copy_artifact(working_dir / name, output_dir, verify=config.verify)
        log.info(
            "artifact_staged",
            artifact=artifact.name,
            destination=str(artifact.destination),
            size=artifact.size,
            sha256=artifact.sha256,
        )
        staged.append(artifact)

    return StageResult(
        id=run_id,
        working_dir=working_dir,
        output_dir=output_dir,
        created_output_dir=created,
        artifacts=tuple(staged),
    )


async def prebuild(working_dir: Path) -> StageResult:
    """Pre-packaging hook: stage executorserver and executorserver.exe into file/."""
    return await stage_artifacts(working_dir, DEFAULT_CONFIG)
