"""Capture the environment changes a script makes inside another shell."""

from shenv.capture import capture_env
from shenv.differ import diff
from shenv.errors import (
    CaptureError,
    ExecutionError,
    SnapshotParseError,
    SpawnError,
    TempFileError,
)
from shenv.models import CaptureConfig

__version__ = "0.3.1"

__all__ = [
    "CaptureConfig",
    "CaptureError",
    "ExecutionError",
    "SnapshotParseError",
    "SpawnError",
    "TempFileError",
    "__version__",
    "capture_env",
    "diff",
]
