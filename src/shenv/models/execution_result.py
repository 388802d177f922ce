"""Result model for one interpreter run."""

from dataclasses import dataclass


@dataclass
class ExecutionResult:
    """What the target interpreter reported while running the composite script."""

    argv: list[str]
    returncode: int
    stdout: str
    stderr: str
