"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a StringIO-backed Console; :func:`render_result`
returns the captured text. Renderers are dispatched by ``result.op``;
unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from tileplan.output.console import create_console, get_output, style_for_pattern

if TYPE_CHECKING:
    from rich.console import Console

    from tileplan.services.result import ServiceResult

LAYOUT_PREVIEW_ROWS = 20


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* to text. No ANSI codes when not on a terminal."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Minimal output for ``--quiet``: the one number or list that matters."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    data = result.data
    if result.op == "plan":
        return str(data.get("purchase_tiles", 0))
    if result.op == "layout":
        return str(data.get("count", 0))
    if result.op == "convert":
        return str(data.get("formatted", ""))
    if result.op == "patterns":
        return "\n".join(str(item["pattern"]) for item in data.get("items", []))
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _num(value: Any, places: int = 2) -> str:
    """Fixed-point text with trailing zeros trimmed; non-numbers pass through."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, int):
        return str(value)
    text = f"{value:.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "tp.ok"), (f"  {result.op}", "tp.op")))


def _field(console: Console, key: str, value: Any, *, style: str = "") -> None:
    console.print(Text.assemble((f"  {key}: ", "tp.key"), (_num(value), style)))


def _render_meta(console: Console, result: ServiceResult) -> None:
    """Print meta, including the telemetry span tree (verbose only)."""
    if not result.meta:
        return
    console.print()
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        if key == "telemetry":
            _render_span(console, value, indent=4)
        else:
            console.print(f"    {key}: {value}")


def _render_span(console: Console, span: dict[str, Any], indent: int) -> None:
    duration = float(span.get("duration_ms", 0.0))
    style = "bold red" if duration > 1000 else "yellow" if duration > 100 else "dim"
    line = Text(" " * indent)
    line.append(f"{duration:>9.3f}ms", style=style)
    line.append(f"  {span.get('name', '?')}")
    notes = span.get("annotations") or {}
    if notes:
        line.append("  (" + ", ".join(f"{k}={v}" for k, v in notes.items()) + ")")
    console.print(line)
    for child in span.get("children", []):
        _render_span(console, child, indent + 4)


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(Text.assemble(("ERROR", "tp.error"), (f"  {result.op}", "tp.op"), f" — {msg}"))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for key, value in err.detail.items():
            console.print(f"    {key}: {value}")


# ── Plan ──────────────────────────────────────────────────────────────


def _render_plan(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    room = d["room"]
    tile = d["tile"]
    pattern = str(d["pattern"])

    _status_line(console, result)
    console.print(
        f"  {room['shape'].upper()}: {_num(room['length'])} × {_num(room['width'])} "
        f"{room['unit']}  |  TILE: {_num(tile['length'])} × {_num(tile['width'])} "
        f"{tile['unit']} (grout {_num(tile['grout'])})  |  ",
        Text(f"PATTERN: {pattern.upper()}", style=style_for_pattern(pattern)),
        sep="",
    )
    console.print()

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Quantity", style="tp.key")
    table.add_column("Value", justify="right", style="tp.value")
    table.add_row("Room area", f"{_num(d['total_area_m2'])} m²")
    table.add_row("Tile area", f"{_num(d['tile_area_m2'], 4)} m²")
    table.add_row("Tiles laid", str(d["total_tiles"]))
    table.add_row(Text("Full tiles", style="tp.full"), str(d["full_tiles"]))
    table.add_row(Text("Cut tiles", style="tp.cut"), str(d["cut_tiles"]))
    table.add_row("Waste allowance", f"{_num(d['waste_percentage'])}%")
    table.add_row("Tiles to buy", str(d["purchase_tiles"]))
    table.add_row("Grout area", f"{_num(d['grout_area_m2'])} m²")
    table.add_row("Coverage", f"{d['coverage'] * 100:.1f}%")
    table.add_row("Cutting", str(d["cutting_complexity"]))
    console.print(table)

    materials = d.get("shopping_list")
    if materials:
        console.print()
        _render_shopping_list(console, materials)

    cost = d.get("cost")
    if cost:
        console.print()
        currency = cost["currency"]
        _field(console, "tile_cost", f"{cost['tile_cost']:.2f} {currency}", style="tp.money")
        _field(console, "grout_cost", f"{cost['grout_cost']:.2f} {currency}", style="tp.money")
        _field(console, "total_cost", f"{cost['total_cost']:.2f} {currency}", style="tp.money")

    if verbose:
        _render_meta(console, result)


def _render_shopping_list(console: Console, materials: dict[str, Any]) -> None:
    table = Table(title="Shopping list", show_header=True, pad_edge=False, expand=False)
    table.add_column("Item", style="tp.key")
    table.add_column("Quantity", justify="right", style="tp.value")
    table.add_column("Notes", style="dim")
    for entry in (materials["tiles"], materials["grout"], *materials["accessories"]):
        table.add_row(entry["item"], f"{entry['quantity']} {entry['unit']}", entry["description"])
    console.print(table)


# ── Layout ────────────────────────────────────────────────────────────


def _render_layout(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    _field(console, "pattern", d["pattern"], style=style_for_pattern(str(d["pattern"])))
    _field(console, "space", d["space"])
    _field(console, "scale", _num(d["scale"], 6))
    _field(console, "grout_width", d["grout_width"])
    _field(console, "count", d["count"])
    _field(console, "cut_count", d["cut_count"], style="tp.cut")

    boundary = d.get("boundary", [])
    outline = " → ".join(f"({_num(p['x'])}, {_num(p['y'])})" for p in boundary)
    _field(console, "boundary", outline or "none")

    placements = d.get("placements", [])
    if placements:
        shown = placements if verbose else placements[:LAYOUT_PREVIEW_ROWS]
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        for name in ("Row", "Col", "X", "Y", "Width", "Height"):
            table.add_column(name, justify="right")
        table.add_column("Kind")
        for p in shown:
            kind = Text("cut", style="tp.cut") if p["is_cut"] else Text("full", style="tp.full")
            table.add_row(
                str(p["row"]),
                str(p["col"]),
                _num(p["x"]),
                _num(p["y"]),
                _num(p["width"]),
                _num(p["height"]),
                kind,
            )
        console.print()
        console.print(table)
        hidden = len(placements) - len(shown)
        if hidden:
            console.print(Text(f"  … {hidden} more (use -v to list all)", style="dim"))

    if verbose:
        _render_meta(console, result)


# ── Convert / patterns ────────────────────────────────────────────────


def _render_convert(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    _status_line(console, result)
    suffix = "²" if d["kind"] == "area" else ""
    console.print(
        f"  {_num(d['value'], 6)} {d['from_unit']}{suffix} = ",
        Text(str(d["formatted"]), style="tp.value"),
        sep="",
    )
    if verbose:
        _render_meta(console, result)


def _render_patterns(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Pattern")
    table.add_column("Waste", justify="right")
    table.add_column("Description")
    for item in result.data.get("items", []):
        name = str(item["pattern"])
        table.add_row(
            Text(name, style=style_for_pattern(name)),
            f"{_num(item['waste_percentage'])}%",
            str(item["description"]),
        )
    console.print(table)


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)
    if verbose:
        _render_meta(console, result)


_OP_RENDERERS = {
    "plan": _render_plan,
    "layout": _render_layout,
    "convert": _render_convert,
    "patterns": _render_patterns,
}
