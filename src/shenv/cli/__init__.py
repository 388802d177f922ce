"""Command-line interface for shenv."""

from shenv.cli.app import entrypoint, main

__all__ = ["entrypoint", "main"]
