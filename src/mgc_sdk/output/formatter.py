"""Render command results as a table, JSON, YAML or CSV."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence
from typing import Any

import yaml
from pydantic import BaseModel
from rich.console import Console

from mgc_sdk.output.tables import kv_table, make_table

FORMATS = ("table", "json", "yaml", "csv")

console = Console()


def to_plain(data: Any) -> Any:
    """Convert models (or lists of them) to JSON-compatible values."""
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json", exclude_none=True)
    if isinstance(data, (list, tuple)):
        return [to_plain(item) for item in data]
    if isinstance(data, dict):
        return {key: to_plain(value) for key, value in data.items()}
    return data


def output_json(data: Any) -> None:
    console.print_json(json.dumps(to_plain(data), indent=2, default=str))


def output_yaml(data: Any) -> None:
    console.print(
        yaml.safe_dump(to_plain(data), default_flow_style=False, sort_keys=False), end="",
    )


def output_csv(columns: Sequence[str], rows: Sequence[Sequence[Any]]) -> None:
    buf = io.StringIO()
    writer = csv.writer(buf)
    writer.writerow(columns)
    writer.writerows([[str(v) if v is not None else "" for v in row] for row in rows])
    console.print(buf.getvalue(), end="")


def output_table(
    data: Any,
    *,
    columns: Sequence[str] | None = None,
    rows: Sequence[Sequence[Any]] | None = None,
    title: str | None = None,
) -> None:
    if columns and rows is not None:
        console.print(make_table(title, columns, rows))
        return
    plain = to_plain(data)
    if isinstance(plain, dict):
        console.print(kv_table(plain, title=title))
    else:
        console.print(plain)


def output(
    data: Any,
    fmt: str = "table",
    *,
    columns: Sequence[str] | None = None,
    rows: Sequence[Sequence[Any]] | None = None,
    title: str | None = None,
) -> None:
    """Dispatch *data* to the formatter for *fmt*.

    CSV needs ``columns`` and ``rows``; without them it falls back to JSON.
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown output format '{fmt}' (expected one of: {', '.join(FORMATS)})")
    if fmt == "json":
        output_json(data)
    elif fmt == "yaml":
        output_yaml(data)
    elif fmt == "csv":
        if columns and rows is not None:
            output_csv(columns, rows)
        else:
            output_json(data)
    else:
        output_table(data, columns=columns, rows=rows, title=title)
