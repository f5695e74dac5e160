"""Fallback console output for gti."""

import click

from gti.cli.constants import TOOL_NAME


def fallback_log(message: object, *, tool_name: str = TOOL_NAME) -> None:
    """Write a single `<tool>: <message>` line to stdout.

    Used when logging is not configured, which is the case for every normal run.
    """
    click.echo(f"{tool_name}: {message}")
