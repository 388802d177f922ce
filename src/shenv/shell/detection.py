"""Target interpreter detection."""

import logging
import os
import re
import shutil

from shenv.errors import SpawnError

log = logging.getLogger(__name__)

_PYTHON_RE = re.compile(r"python(\d+(\.\d+)?)?")


def classify_shell(candidate: str) -> str | None:
    """Return the dialect kind for a candidate executable/path."""
    name = os.path.basename(candidate).lower()
    if name.endswith(".exe"):
        name = name[: -len(".exe")]
    if name in {"sh", "dash", "ash", "ksh", "mksh"}:
        return "sh"
    if name in {"bash", "zsh", "fish"}:
        return name
    if name in {"pwsh", "powershell"}:
        return "powershell"
    if _PYTHON_RE.fullmatch(name):
        return "python"
    return None


def resolve_executable(candidate: str) -> str | None:
    """Resolve an executable name or path to a runnable command path."""
    has_sep = os.path.sep in candidate or (
        os.path.altsep is not None and os.path.altsep in candidate
    )
    if has_sep:
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
        return None
    return shutil.which(candidate)


def shell_candidates(preferred: str | None = None) -> list[str]:
    """Return interpreter candidates in preference order."""
    candidates: list[str] = []
    override = os.environ.get("SHENV_SHELL", "").strip()
    if override:
        candidates.append(override)

    if preferred and preferred.strip():
        candidates.append(preferred.strip())

    env_shell = os.environ.get("SHELL", "").strip()
    if env_shell:
        candidates.append(env_shell)

    if os.name == "nt":
        candidates.extend(["pwsh", "powershell", "bash"])
    else:
        candidates.extend(["sh", "bash", "zsh"])

    deduped: list[str] = []
    seen: set[str] = set()
    for item in candidates:
        key = item.lower()
        if key in seen:
            continue
        seen.add(key)
        deduped.append(item)
    return deduped


def resolve_shell(candidate: str) -> tuple[str, str]:
    """Return (kind, executable path) for an explicitly requested interpreter."""
    kind = classify_shell(candidate)
    if kind is None:
        raise SpawnError(
            f"Unsupported interpreter {candidate!r}. "
            "Use sh, bash, zsh, fish, pwsh/powershell, or python."
        )
    executable = resolve_executable(candidate)
    if executable is None:
        raise SpawnError(f"Interpreter {candidate!r} was not found or is not executable")
    return kind, executable


def detect_shell(preferred: str | None = None) -> tuple[str, str]:
    """Detect a supported interpreter and return (kind, executable path)."""
    for candidate in shell_candidates(preferred):
        kind = classify_shell(candidate)
        if not kind:
            log.debug("skipping unsupported interpreter %s", candidate)
            continue
        executable = resolve_executable(candidate)
        if executable:
            return kind, executable
    raise SpawnError(
        "No supported interpreter found. Install sh, bash, zsh, fish, or PowerShell, "
        "or set SHENV_SHELL to one of them."
    )
