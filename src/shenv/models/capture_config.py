"""Strategy slots used by one environment capture."""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from pathlib import Path

from shenv.compose import compose, invoke_posix, preprocess
from shenv.probe import snapshot_command

Command = list[str]


@dataclass
class CaptureConfig:
    """How to run a script in the target interpreter and probe its environment.

    Every slot has a working default for POSIX shells; presets in
    ``shenv.shell.presets`` swap in the dialect-specific ones.
    """

    shell: str = "/bin/sh"
    invoke: Callable[[str, str], Command] = invoke_posix
    compose: Callable[[Command], str] = compose
    preprocess: Callable[[str], str] = preprocess
    snapshot: Callable[[Path], Command] = snapshot_command
    epilogue: Command = field(default_factory=lambda: ["true"])
    temp_dir: str | None = None

    def with_overrides(self, **overrides) -> "CaptureConfig":
        """Return a copy with the given slots replaced."""
        return replace(self, **overrides)
