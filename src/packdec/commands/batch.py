"""Command: encode every literal in a file."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from packdec.commands._base import PackdecCommand
from packdec.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from packdec.commands._context import AppContext


def read_literals(raw: str) -> list[str]:
    """Parse a batch file body.

    A body starting with ``[`` is a JSON array of strings; anything else is
    one literal per non-blank line, surrounding whitespace stripped.

    Raises:
        ValueError: The JSON form is not an array of strings.
    """
    body = raw.strip()
    if body.startswith("["):
        items = json.loads(body)
        if not isinstance(items, list) or not all(isinstance(i, str) for i in items):
            raise ValueError("JSON batch file must contain an array of strings.")
        return items
    return [line.strip() for line in body.splitlines() if line.strip()]


@click.command(
    cls=PackdecCommand,
    examples="""\
  packdec batch prices.txt
  packdec batch prices.json --partial
  packdec --json batch ledger.txt""",
)
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--partial/--no-partial",
    default=None,
    help="Continue past malformed literals (default from [batch] partial).",
)
@click.pass_obj
def batch(app: AppContext, file: str, partial: bool | None) -> None:
    """Encode every literal in FILE (JSON array, or one per line)."""
    try:
        with open(file, encoding="utf-8") as f:
            raw = f.read()
    except (OSError, UnicodeDecodeError) as exc:
        app.emit(
            ServiceResult(
                ok=False,
                op="encode_batch",
                error=ServiceError(code="invalid_file", message=f"Error reading {file}: {exc}"),
            )
        )
        return

    try:
        literals = read_literals(raw)
    except ValueError as exc:
        # json.JSONDecodeError is a ValueError
        app.emit(
            ServiceResult(
                ok=False,
                op="encode_batch",
                error=ServiceError(code="invalid_format", message=str(exc)),
            )
        )
        return

    app.emit(app.service.encode_batch(literals, partial=partial))
