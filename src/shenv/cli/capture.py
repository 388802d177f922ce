"""Default `shenv` command: capture and print environment changes."""

import argparse
import logging
import sys
from pathlib import Path

from shenv import __version__
from shenv.capture import capture_env
from shenv.cli.shared import OUTPUT_FORMATS, filter_env, format_env, setup_logging
from shenv.config import load_config
from shenv.errors import CaptureError, ExecutionError
from shenv.models import CONVENTIONAL_IGNORES
from shenv.shell import preset_for

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build parser for capture mode."""
    parser = argparse.ArgumentParser(
        prog="shenv",
        description=(
            "Run a script in another shell and print the environment variables it set"
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-s",
        "--shell",
        help="Interpreter to run the script in (sh, bash, zsh, fish, pwsh, python, or a path)",
    )
    parser.add_argument("-c", "--command", help="Script text to run instead of reading a file")
    parser.add_argument(
        "file",
        nargs="?",
        help="Script file to run; reads stdin when omitted or '-'",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=OUTPUT_FORMATS,
        default="json",
        help="Output as JSON (default) or as assignments for the given shell",
    )
    parser.add_argument(
        "--skip-conventional",
        action="store_true",
        help="Drop PWD, OLDPWD, SHLVL, _ and SHENV_LOG_LEVEL from the output",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="NAME",
        help="Drop NAME from the output (repeatable)",
    )
    return parser


def read_script(args: argparse.Namespace) -> str:
    """Return the script text selected by -c, a file argument, or stdin."""
    if args.command is not None:
        return args.command
    if args.file is None or args.file == "-":
        return sys.stdin.read()
    # Non-UTF-8 bytes survive as surrogates and are re-encoded verbatim in argv.
    return Path(args.file).read_text(encoding="utf-8", errors="surrogateescape")


def run(argv: list[str]) -> int:
    """Execute capture mode."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command is not None and args.file is not None:
        parser.error("-c/--command and a script file cannot be used together")

    setup_logging(args.debug)
    config = load_config()

    try:
        script = read_script(args)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: cannot read script: {e}", file=sys.stderr)
        return 1

    try:
        capture_config = preset_for(args.shell, preferred=config.shell)
        changed = capture_env(script, capture_config)
    except CaptureError as e:
        print(f"Error: {e}", file=sys.stderr)
        if isinstance(e, ExecutionError) and e.stderr.strip():
            print(e.stderr.rstrip(), file=sys.stderr)
        return 1

    ignored = set(config.ignore) | set(args.ignore)
    if args.skip_conventional or config.skip_conventional:
        ignored |= CONVENTIONAL_IGNORES
    changed = filter_env(changed, ignored)
    log.debug("reporting %d variable(s)", len(changed))

    # Values may carry undecodable bytes as surrogates; write them back as bytes.
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(errors="surrogateescape")
    print(format_env(changed, args.format))
    return 0
