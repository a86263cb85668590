"""Command: encode one decimal literal."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from packdec.commands._base import PackdecCommand

if TYPE_CHECKING:
    from packdec.commands._context import AppContext


@click.command(
    cls=PackdecCommand,
    examples="""\
  packdec encode 1234.56789
  packdec encode -- -99084.566
  packdec --json encode +42
  packdec -q encode 75.5""",
)
@click.argument("literal")
@click.pass_obj
def encode(app: AppContext, literal: str) -> None:
    """Encode LITERAL into sign, scale, and packed digits."""
    app.emit(app.service.encode(literal))
