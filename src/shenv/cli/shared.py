"""Shared CLI helpers: logging setup and output rendering."""

import json
import logging
import os
import re
import shlex

log = logging.getLogger(__name__)

OUTPUT_FORMATS = ("json", "posix", "fish", "powershell")
_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def setup_logging(debug: bool) -> None:
    """Configure root logging from the -d flag or SHENV_LOG_LEVEL."""
    level = logging.DEBUG if debug else logging.WARNING
    override = os.environ.get("SHENV_LOG_LEVEL", "").strip().upper()
    if not debug and override in logging.getLevelNamesMapping():
        level = logging.getLevelNamesMapping()[override]
    logging.basicConfig(
        level=level,
        format="%(name)s %(levelname)s: %(message)s",
    )


def _fish_quote(value: str) -> str:
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def _powershell_quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def format_env(env: dict[str, str], output_format: str) -> str:
    """Render changed variables so the named shell can apply them.

    Assignment formats skip names that are not shell identifiers, such as
    bash's exported functions (``BASH_FUNC_name%%``).
    """
    if output_format == "json":
        return json.dumps(env, indent=2)
    if output_format == "posix":
        template, quote = "export {name}={value}", shlex.quote
    elif output_format == "fish":
        template, quote = "set -gx {name} {value}", _fish_quote
    elif output_format == "powershell":
        template, quote = "$env:{name} = {value}", _powershell_quote
    else:
        raise ValueError(f"Unknown output format: {output_format}")

    lines = []
    for name, value in env.items():
        if not _IDENTIFIER_RE.fullmatch(name):
            log.warning("Skipping %r: not a valid %s variable name", name, output_format)
            continue
        lines.append(template.format(name=name, value=quote(value)))
    return "\n".join(lines)


def filter_env(env: dict[str, str], ignored: set[str]) -> dict[str, str]:
    """Drop names the caller does not want to apply."""
    return {name: value for name, value in env.items() if name not in ignored}
