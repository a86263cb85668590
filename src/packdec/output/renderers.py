"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from packdec.output.console import create_console, get_output, style_for_sign

if TYPE_CHECKING:
    from rich.console import Console

    from packdec.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    if result.op == "encode":
        return str(result.data.get("hex", ""))
    if result.op == "validate":
        return "valid" if result.data.get("valid") else "invalid"
    if result.op == "encode_batch":
        return "\n".join(str(item.get("hex", "")) for item in result.data.get("encoded", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="pd.ok")
    op = Text(f"  {result.op}", style="pd.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="pd.key")
    if key == "hex":
        v = Text(str(value), style="pd.hex")
    elif key == "sign":
        v = Text(str(value), style=style_for_sign(str(value)))
    elif key == "packed_digits" and isinstance(value, list):
        v = Text(" ".join(f"0x{b:02x}" for b in value))
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print the telemetry span tree (verbose only)."""
    if not result.meta:
        return
    telemetry = result.meta.get("telemetry")
    if not telemetry:
        return
    console.print(Text("  telemetry:", style="dim"))
    _render_span(console, telemetry, indent=4)


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    pad = " " * indent
    console.print(f"{pad}{span.get('name')} [dim]{span.get('duration_ms', 0)}ms[/dim]")
    for child in span.get("children", []):
        _render_span(console, child, indent + 2)


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="pd.error")
    op = Text(f"  {result.op}", style="pd.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    for item in result.data.get("errors", []):
        line = Text("  error", style="pd.error")
        line.append(f" index={item.get('index')}: {item.get('error')}")
        console.print(line)

    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Operation renderers ───────────────────────────────────────────────


def _render_encode(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("input", "sign", "fractional_digit_count", "packed_digits", "hex"):
        if key in result.data:
            _field(console, key, result.data[key])
    if verbose:
        _render_meta(console, result)


def _render_validate(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "input", result.data.get("input", ""))
    valid = bool(result.data.get("valid"))
    verdict = Text("valid" if valid else "invalid", style="pd.ok" if valid else "pd.error")
    console.print(Text("  verdict: ", style="pd.key"), verdict, sep="")
    if verbose:
        _render_meta(console, result)


def _render_batch(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render encode_batch results as a table."""
    _status_line(console, result)
    encoded = result.data.get("encoded", [])
    _field(console, "encoded", len(encoded))

    if encoded:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Input")
        table.add_column("Sign")
        table.add_column("Scale", justify="right")
        table.add_column("Hex", style="pd.hex")
        for item in encoded:
            sign = str(item.get("sign", ""))
            table.add_row(
                Text(str(item.get("input", ""))),
                Text(sign, style=style_for_sign(sign)),
                str(item.get("fractional_digit_count", "")),
                str(item.get("hex", "")),
            )
        console.print(table)

    if verbose:
        _render_meta(console, result)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS = {
    "encode": _render_encode,
    "validate": _render_validate,
    "encode_batch": _render_batch,
}
