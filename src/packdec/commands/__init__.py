"""Subcommand modules for packdec.

Provides register_commands() which uses deferred imports to keep
``packdec --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from packdec.commands.batch import batch
    from packdec.commands.encode import encode
    from packdec.commands.validate import validate

    cli.add_command(encode)
    cli.add_command(validate)
    cli.add_command(batch)
