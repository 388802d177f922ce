"""Typed failures raised while capturing a foreign environment."""

from pathlib import Path


class CaptureError(Exception):
    """Base exception for environment capture."""

    pass


class SpawnError(CaptureError):
    """The target interpreter is missing, unknown, or cannot be executed."""

    pass


class ExecutionError(CaptureError):
    """The target interpreter exited with a non-zero status."""

    def __init__(self, message: str, returncode: int, stdout: str = "", stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


class SnapshotParseError(CaptureError):
    """A snapshot file is missing or does not hold a flat string mapping."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class TempFileError(CaptureError):
    """A snapshot temp file could not be created."""

    pass
