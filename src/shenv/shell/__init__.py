"""Interpreter detection and per-dialect capture presets."""

from shenv.shell.detection import classify_shell, detect_shell, resolve_shell, shell_candidates
from shenv.shell.presets import (
    PRESETS,
    posix_preset,
    powershell_preset,
    preset_for,
    python_preset,
)

__all__ = [
    "PRESETS",
    "classify_shell",
    "detect_shell",
    "posix_preset",
    "powershell_preset",
    "preset_for",
    "python_preset",
    "resolve_shell",
    "shell_candidates",
]
