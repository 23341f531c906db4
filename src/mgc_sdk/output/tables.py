"""Rich table helpers."""

from __future__ import annotations

from enum import Enum
from typing import Any, Sequence

from rich.table import Table


def cell(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def model_rows(items: Sequence[Any], fields: Sequence[str]) -> list[list[str]]:
    """Pick *fields* from each item; dotted names reach into nested models."""
    rows = []
    for item in items:
        row = []
        for field in fields:
            value = item
            for part in field.split("."):
                value = getattr(value, part, None)
                if value is None:
                    break
            row.append(cell(value))
        rows.append(row)
    return rows


def make_table(
    title: str | None,
    columns: Sequence[str],
    rows: Sequence[Sequence[Any]],
    *,
    show_lines: bool = False,
) -> Table:
    table = Table(title=title, show_lines=show_lines)
    for col in columns:
        table.add_column(col, no_wrap=False)
    for row in rows:
        table.add_row(*(cell(c) for c in row))
    return table


def kv_table(data: dict[str, Any], *, title: str | None = None) -> Table:
    """Render a flat mapping as a two-column table."""
    table = Table(title=title, show_header=False, show_lines=False)
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    for key, value in data.items():
        table.add_row(key, cell(value))
    return table
