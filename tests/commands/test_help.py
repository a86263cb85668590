"""Help and version output for the CLI."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from packdec import __version__
from packdec.cli import cli

pytestmark = pytest.mark.usefixtures("isolated_root")

HELP_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["--help"], ["encode", "validate", "batch", "--json", "--log-json"]),
    (["encode", "--help"], ["LITERAL", "--examples"]),
    (["validate", "--help"], ["LITERAL", "--strict"]),
    (["batch", "--help"], ["FILE", "--partial"]),
]


@pytest.mark.parametrize(("args", "keywords"), HELP_COMMANDS)
def test_help(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    for keyword in keywords:
        assert keyword in result.output


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_no_subcommand_prints_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output
