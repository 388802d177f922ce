"""`shenv configure` command implementation."""

import argparse
import sys

from shenv.cli.shared import setup_logging
from shenv.config import config_path, load_config, save_config
from shenv.shell import classify_shell


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the configure command."""
    parser = argparse.ArgumentParser(
        prog="shenv configure",
        description="Set the default interpreter and output filtering for shenv",
    )
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--shell", help="Default interpreter (name or path)")
    parser.add_argument(
        "--clear-shell",
        action="store_true",
        help="Remove the stored interpreter and fall back to detection",
    )
    conventional_group = parser.add_mutually_exclusive_group()
    conventional_group.add_argument(
        "--skip-conventional",
        action="store_true",
        help="Always drop PWD, OLDPWD, SHLVL, _ and SHENV_LOG_LEVEL from output",
    )
    conventional_group.add_argument(
        "--keep-conventional",
        action="store_true",
        help="Report conventional names like any other variable (default)",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=[],
        metavar="NAME",
        help="Add NAME to the stored ignore list (repeatable)",
    )
    parser.add_argument(
        "--clear-ignore",
        action="store_true",
        help="Empty the stored ignore list before applying --ignore",
    )
    return parser


def run(argv: list[str]) -> int:
    """Execute the configure command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.debug)

    if args.clear_shell and args.shell is not None:
        print("Error: --shell and --clear-shell cannot be used together", file=sys.stderr)
        return 2
    if args.shell is not None and classify_shell(args.shell) is None:
        print(f"Error: unsupported interpreter {args.shell!r}", file=sys.stderr)
        return 1

    config = load_config()
    if args.shell is not None:
        config.shell = args.shell
    if args.clear_shell:
        config.shell = None
    if args.skip_conventional:
        config.skip_conventional = True
    if args.keep_conventional:
        config.skip_conventional = False
    if args.clear_ignore:
        config.ignore = []
    for name in args.ignore:
        if name not in config.ignore:
            config.ignore.append(name)

    try:
        path = save_config(config)
    except OSError as e:
        print(f"Error: cannot write {config_path()}: {e}", file=sys.stderr)
        return 1

    print(f"\nConfiguration saved to {path}")
    print(f"  shell: {config.shell or '(detect)'}")
    print("  skip_conventional: " + ("true" if config.skip_conventional else "false"))
    print(f"  ignore: {', '.join(config.ignore) or '(none)'}")
    print("")
    return 0
