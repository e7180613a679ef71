import pytest
import pytest_asyncio
from pathlib import Path


@pytest.fixture
def working_dir(tmp_path: Path) -> Path:
    """Working directory holding both prebuilt binaries"""
    (tmp_path / "executorserver").write_bytes(b"AAAA")
    (tmp_path / "executorserver").chmod(0o755)
    (tmp_path / "executorserver.exe").write_bytes(b"BBBB")
    return tmp_path


@pytest.fixture
def output_dir(working_dir: Path) -> Path:
    return working_dir / "file"


@pytest_asyncio.fixture
async def staged(working_dir: Path):
    """Working directory after one successful prebuild run"""
    from artifact_stager.stager import prebuild

    result = await prebuild(working_dir)
    yield result
