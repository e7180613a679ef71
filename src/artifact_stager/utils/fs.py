import hashlib
import shutil
from pathlib import Path

from artifact_stager.errors import CopyFailureError, MissingSourceArtifactError
from artifact_stager.types import StagedArtifact


def compute_file_hash(path: Path) -> str:
    """Compute SHA-256 hash of a file."""
    sha256_hash = hashlib.sha256()
    with open(path, "rb") as f:
        for byte_block in iter(lambda: f.read(4096), b""):
            sha256_hash.update(byte_block)
    return sha256_hash.hexdigest()


def copy_artifact(source: Path, dest_dir: Path, verify: bool = False) -> StagedArtifact:
    """Copy a single artifact into dest_dir under its own name.

    An existing file at the destination is replaced. Permission bits follow
    the source so executables stay executable.
    """
    if not source.exists():
        raise MissingSourceArtifactError(source.name, source)

    dest_path = dest_dir / source.name

    try:
        shutil.copyfile(source, dest_path)
        shutil.copymode(source, dest_path)
    except FileNotFoundError as e:
        if not source.exists():
            raise MissingSourceArtifactError(source.name, source) from e
        raise CopyFailureError(source, dest_path, e.strerror or str(e)) from e
    except OSError as e:
        raise CopyFailureError(source, dest_path, e.strerror or str(e)) from e

    digest = None
    if verify:
        try:
            digest = compute_file_hash(dest_path)
            expected = compute_file_hash(source)
        except OSError as e:
            raise CopyFailureError(source, dest_path, e.strerror or str(e)) from e
        if digest != expected:
            raise CopyFailureError(
                source, dest_path, f"checksum mismatch: {digest} != {expected}"
            )

    return StagedArtifact(
        name=source.name,
        source=source,
        destination=dest_path,
        size=dest_path.stat().st_size,
        sha256=digest,
    )
