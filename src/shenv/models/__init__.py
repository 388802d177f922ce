"""Model package for shenv."""

from shenv.models.capture_config import CaptureConfig, Command
from shenv.models.execution_result import ExecutionResult
from shenv.models.shenv_config import CONVENTIONAL_IGNORES, ShenvConfig

__all__ = [
    "CONVENTIONAL_IGNORES",
    "CaptureConfig",
    "Command",
    "ExecutionResult",
    "ShenvConfig",
]
