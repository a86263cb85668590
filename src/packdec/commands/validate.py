"""Command: check a literal against the decimal grammar."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from packdec.commands._base import PackdecCommand

if TYPE_CHECKING:
    from packdec.commands._context import AppContext


@click.command(
    cls=PackdecCommand,
    examples="""\
  packdec validate 566.25
  packdec validate 566.
  packdec --json validate -- -.5""",
)
@click.argument("literal")
@click.option("--strict", is_flag=True, help="Exit with code 1 when the literal is invalid.")
@click.pass_obj
def validate(app: AppContext, literal: str, strict: bool) -> None:
    """Report whether LITERAL is a well-formed decimal literal."""
    result = app.service.validate(literal)
    app.emit(result)
    if strict and not result.data.get("valid"):
        raise SystemExit(1)
