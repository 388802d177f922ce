import pytest


@pytest.fixture
def snapshot_dir(tmp_path):
    """A private temp directory so tests can check that snapshots are removed."""
    path = tmp_path / "snapshots"
    path.mkdir()
    return path
