"""Run a composite script inside the target interpreter."""

import logging
import subprocess

from shenv.errors import ExecutionError, SpawnError
from shenv.models.execution_result import ExecutionResult

log = logging.getLogger(__name__)


def with_epilogue(script: str, epilogue: str) -> str:
    """Append the fixed no-op so every run ends on the same statement."""
    return script + epilogue


def execute(argv: list[str]) -> ExecutionResult:
    """Spawn argv, wait for it, and fail on a non-zero exit status."""
    log.debug("spawning %s", argv[0])
    try:
        completed = subprocess.run(argv, capture_output=True, text=True)
    except (FileNotFoundError, PermissionError) as e:
        raise SpawnError(f"Cannot run interpreter {argv[0]!r}: {e}") from e
    except OSError as e:
        raise SpawnError(f"Failed to start interpreter {argv[0]!r}: {e}") from e

    result = ExecutionResult(
        argv=argv,
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )
    if result.stderr:
        log.debug("%s stderr: %s", argv[0], result.stderr.rstrip())
    if result.returncode != 0:
        raise ExecutionError(
            f"{argv[0]} exited with status {result.returncode}",
            returncode=result.returncode,
            stdout=result.stdout,
            stderr=result.stderr,
        )
    return result
