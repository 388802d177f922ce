"""Run a script in a foreign interpreter and report the environment it leaves behind."""

import logging
import os
import tempfile
from enum import Enum
from pathlib import Path

from shenv.differ import diff
from shenv.errors import TempFileError
from shenv.executor import execute, with_epilogue
from shenv.models import CaptureConfig
from shenv.probe import load_snapshot

log = logging.getLogger(__name__)


class CaptureState(str, Enum):
    INIT = "init"
    COMPOSING = "composing"
    EXECUTING = "executing"
    PARSING = "parsing"
    DIFFING = "diffing"
    CLEANING_UP = "cleaning_up"
    DONE = "done"
    FAILED = "failed"


def _allocate_snapshot_files(temp_dir: str | None) -> tuple[Path, Path]:
    """Create the before/after files, removing the first if the second fails."""
    paths: list[Path] = []
    try:
        for label in ("before", "after"):
            handle = tempfile.NamedTemporaryFile(
                mode="w", prefix=f"shenv_{label}_", suffix=".json", dir=temp_dir, delete=False
            )
            handle.close()
            paths.append(Path(handle.name))
    except OSError as e:
        _remove_snapshot_files(paths)
        raise TempFileError(f"Cannot create snapshot file: {e}") from e
    return paths[0], paths[1]


def _remove_snapshot_files(paths: list[Path]) -> None:
    for path in paths:
        try:
            os.unlink(path)
        except FileNotFoundError:
            log.debug("snapshot file %s already gone", path)
        except OSError as e:
            log.warning("Could not remove snapshot file %s: %s", path, e)


def build_script(config: CaptureConfig, script: str, before: Path, after: Path) -> str:
    """Return the composite script: probe, user input, epilogue, probe."""
    return (
        config.compose(config.snapshot(before))
        + config.preprocess(script)
        + config.compose(config.epilogue)
        + config.compose(config.snapshot(after))
    )


def capture_env(script: str, config: CaptureConfig | None = None) -> dict[str, str]:
    """Run script in the configured interpreter and return the variables it set.

    The caller's own environment is untouched; the result maps each new or
    changed variable to its final value. Raises a ``CaptureError`` subclass on
    any failure, after the snapshot files have been removed.
    """
    config = config or CaptureConfig()
    state = CaptureState.INIT
    before_path, after_path = _allocate_snapshot_files(config.temp_dir)
    log.debug("snapshot files: %s %s", before_path, after_path)

    try:
        state = CaptureState.COMPOSING
        composite = build_script(config, script, before_path, after_path)
        argv = config.invoke(config.shell, with_epilogue(composite, config.compose(config.epilogue)))

        state = CaptureState.EXECUTING
        execute(argv)

        state = CaptureState.PARSING
        before = load_snapshot(before_path)
        after = load_snapshot(after_path)

        state = CaptureState.DIFFING
        changed = diff(before, after)
    except BaseException:
        log.debug("capture %s while %s", CaptureState.FAILED.value, state.value)
        raise
    finally:
        log.debug("%s snapshot files", CaptureState.CLEANING_UP.value)
        _remove_snapshot_files([before_path, after_path])

    state = CaptureState.DONE
    log.debug("capture %s: %d variable(s) changed", state.value, len(changed))
    return changed
