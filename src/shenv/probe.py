"""Probes that make an interpreter write its environment to a JSON file."""

import base64
import json
import logging
import sys
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from shenv.errors import SnapshotParseError

log = logging.getLogger(__name__)

# Run by the host Python inside the target shell. It must stay free of single
# quotes and backslashes so the default composer can wrap it verbatim.
PROBE_SOURCE = (
    "import json, os, sys; "
    '__import__("pathlib").Path(sys.argv[1]).write_text('
    'json.dumps(dict(os.environ), ensure_ascii=False), '
    'encoding="utf-8", errors="surrogateescape")'
)

POWERSHELL_PROBE_TEMPLATE = (
    "$vars = [ordered]@{{}}\n"
    "foreach ($item in [Environment]::GetEnvironmentVariables().GetEnumerator()) {{\n"
    "  $vars[[string]$item.Key] = [string]$item.Value\n"
    "}}\n"
    "$vars | ConvertTo-Json -Compress | Set-Content -LiteralPath '{path}' -Encoding utf8\n"
)

_SNAPSHOT = TypeAdapter(dict[str, str])


def snapshot_command(target: Path) -> list[str]:
    """Return a command that dumps the inherited environment to target.

    ``-I`` keeps PYTHON* variables exported by the script from configuring the
    probe interpreter itself; ``os.environ`` still sees them.
    """
    return [sys.executable, "-I", "-c", PROBE_SOURCE, str(target)]


def powershell_snapshot_command(target: Path, executable: str = "pwsh") -> list[str]:
    """Return a command that has a second PowerShell serialize its environment.

    The probe script travels as ``-EncodedCommand`` so it needs no quoting in
    the calling dialect.
    """
    script = POWERSHELL_PROBE_TEMPLATE.format(path=str(target).replace("'", "''"))
    encoded = base64.b64encode(script.encode("utf-16-le")).decode("ascii")
    return [executable, "-NoProfile", "-NonInteractive", "-EncodedCommand", encoded]


def load_snapshot(path: Path) -> dict[str, str]:
    """Parse a snapshot file written by a probe.

    Bytes that are not UTF-8 come back as lone surrogates, the same way
    ``os.environ`` represents them.
    """
    try:
        # Windows PowerShell writes a BOM with -Encoding utf8.
        text = path.read_text(encoding="utf-8-sig", errors="surrogateescape")
    except OSError as e:
        raise SnapshotParseError(f"Cannot read snapshot {path}: {e}", path) from e

    if not text.strip():
        raise SnapshotParseError(f"Snapshot {path} is empty; the probe did not run", path)

    try:
        snapshot = _SNAPSHOT.validate_python(json.loads(text), strict=True)
    except json.JSONDecodeError as e:
        raise SnapshotParseError(f"Snapshot {path} is not valid JSON: {e}", path) from e
    except ValidationError as e:
        raise SnapshotParseError(
            f"Snapshot {path} is not a flat string mapping: {e.error_count()} error(s)", path
        ) from e
    log.debug("loaded %d variables from %s", len(snapshot), path)
    return snapshot
