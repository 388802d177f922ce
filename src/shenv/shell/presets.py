"""Ready-made capture configurations for each supported dialect."""

import logging
from collections.abc import Callable
from functools import partial

from shenv.compose import compose_powershell, compose_python, invoke_powershell
from shenv.models import CaptureConfig
from shenv.probe import powershell_snapshot_command
from shenv.shell.detection import detect_shell, resolve_shell

log = logging.getLogger(__name__)


def posix_preset(executable: str) -> CaptureConfig:
    """sh, bash, zsh and fish all accept the default slots."""
    return CaptureConfig(shell=executable)


def powershell_preset(executable: str) -> CaptureConfig:
    """PowerShell call syntax with a second PowerShell as the probe."""
    return CaptureConfig(
        shell=executable,
        invoke=invoke_powershell,
        compose=compose_powershell,
        snapshot=partial(powershell_snapshot_command, executable=executable),
        epilogue=["Out-Null"],
    )


def python_preset(executable: str) -> CaptureConfig:
    """Another Python interpreter; the script edits ``os.environ`` directly."""
    return CaptureConfig(
        shell=executable,
        compose=compose_python,
        epilogue=[executable, "-I", "-c", "pass"],
    )


PRESETS: dict[str, Callable[[str], CaptureConfig]] = {
    "sh": posix_preset,
    "bash": posix_preset,
    "zsh": posix_preset,
    "fish": posix_preset,
    "powershell": powershell_preset,
    "python": python_preset,
}


def preset_for(shell: str | None = None, preferred: str | None = None) -> CaptureConfig:
    """Return the capture configuration for shell, detecting one when omitted."""
    if shell:
        kind, executable = resolve_shell(shell)
    else:
        kind, executable = detect_shell(preferred)
    log.debug("using %s preset for %s", kind, executable)
    return PRESETS[kind](executable)
