"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from ubicity.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from ubicity.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich."""
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console)
        if verbose and result.meta:
            console.print(Text("  meta:", style="dim"))
            for key, value in result.meta.items():
                console.print(Text(f"    {key}: {value}"))
    else:
        _render_error(result, console)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    if result.op == "validate":
        return "valid" if result.data.get("valid") else "invalid"
    if result.op == "similarity":
        return str(result.data.get("score"))

    items = result.data.get("items") or result.data.get("nodes") or []
    ids = [str(item["id"]) for item in items if isinstance(item, dict) and "id" in item]
    if ids:
        return "\n".join(ids)
    if "count" in result.data:
        return str(result.data["count"])

    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text("OK", style="ubi.ok"), Text(f"  {result.op}", style="ubi.op"))


def _field(console: Console, key: str, value: Any) -> None:
    k = Text(f"  {key}: ", style="ubi.key")
    if isinstance(value, (dict, list)):
        v = Text(json.dumps(value, separators=(",", ":")))
    elif key == "id" or key.endswith("_id"):
        v = Text(str(value), style="ubi.id")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _table(title: str, columns: list[str], rows: list[dict[str, Any]]) -> Table:
    table = Table(title=title, show_edge=False, pad_edge=False)
    for col in columns:
        table.add_column(col)
    for row in rows:
        table.add_row(*(Text(_cell(row.get(col))) for col in columns))
    return table


def _cell(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.4f}"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value)
    return "" if value is None else str(value)


# ── Op renderers ──────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_validate(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    if result.data.get("valid"):
        console.print(Text("  valid", style="ubi.ok"))
        return
    console.print(Text("  invalid", style="ubi.error"))
    for error in result.data.get("errors", []):
        console.print(Text(f"    - {error}"))


def _render_validate_batch(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    data = result.data
    _field(console, "count", data["count"])
    _field(console, "valid_count", data["valid_count"])
    _field(console, "invalid_count", data["invalid_count"])
    for item in data["items"]:
        if not item["valid"]:
            console.print(Text(f"  [{item['index']}] " + "; ".join(item["errors"])))


def _network_renderer(
    node_title: str, edge_title: str, size_label: str
) -> Callable[[ServiceResult, Console], None]:
    def render(result: ServiceResult, console: Console) -> None:
        _status_line(console, result)
        data = result.data
        _field(console, "node_count", data["node_count"])
        _field(console, "edge_count", data["edge_count"])
        if data["nodes"]:
            rows = [{"id": n["id"], size_label: n["size"]} for n in data["nodes"]]
            console.print(_table(node_title, ["id", size_label], rows))
        if data["edges"]:
            console.print(_table(edge_title, ["source", "target", "weight"], data["edges"]))

    return render


def _render_similarity(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    console.print(
        Text("  score: ", style="ubi.key"),
        Text(f"{result.data['score']:.4f}", style="ubi.score"),
        sep="",
    )
    _field(console, "shared", result.data["shared"])


def _items_renderer(title: str, columns: list[str]) -> Callable[[ServiceResult, Console], None]:
    def render(result: ServiceResult, console: Console) -> None:
        _status_line(console, result)
        items = result.data.get("items", [])
        if not items:
            console.print("  (no results)")
            return
        console.print(_table(title, columns, items))

    return render


def _render_anonymize(result: ServiceResult, console: Console) -> None:
    _status_line(console, result)
    rows = []
    for item in result.data.get("items", []):
        location = item["context"]["location"]
        coords = location.get("coordinates")
        rows.append(
            {
                "id": item["id"],
                "learner": item["learner"]["id"],
                "location": location["name"],
                "coordinates": [coords["latitude"], coords["longitude"]] if coords else None,
            }
        )
    if not rows:
        console.print("  (no results)")
        return
    console.print(_table("Anonymized records", ["id", "learner", "location", "coordinates"], rows))


def _render_error(result: ServiceResult, console: Console) -> None:
    msg = result.error.message if result.error else "Unknown error"
    console.print(
        Text("ERROR", style="ubi.error"),
        Text(f"  {result.op}", style="ubi.op"),
        Text(f": {msg}"),
        sep="",
    )


_OP_RENDERERS: dict[str, Callable[[ServiceResult, Console], None]] = {
    "validate": _render_validate,
    "validate_batch": _render_validate_batch,
    "network": _network_renderer("Domains", "Co-occurrences", "size"),
    "similarity": _render_similarity,
    "hubs": _items_renderer("Hub domains", ["id", "size", "weighted_degree", "neighbors"]),
    "similar_learners": _items_renderer("Similar learners", ["id", "similarity", "shared_domains"]),
    "recommend_domains": _items_renderer("Domains to explore", ["id", "relevance"]),
    "recommend_locations": _items_renderer(
        "Locations to visit", ["id", "relevance", "matching_domains"]
    ),
    "time_of_day": _items_renderer("Time of day", ["id", "count", "domains"]),
    "weekdays": _items_renderer("Weekdays", ["id", "count", "domains"]),
    "streaks": _items_renderer("Streaks", ["start", "end", "days", "experiences"]),
    "collaboration": _network_renderer("Learners", "Collaborations", "experiences"),
    "collaborators": _items_renderer("Most collaborative", ["id", "collaborations"]),
    "anonymize": _render_anonymize,
}
