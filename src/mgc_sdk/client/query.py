"""Translate option models into URL query parameters."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel


def _stringify(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(v) for v in value)
    return str(value)


def encode_query(options: BaseModel | None) -> list[tuple[str, str]]:
    """Encode the present fields of *options* as ``(name, value)`` pairs.

    The wire name of each field is its serialization alias (``_limit``,
    ``availability-zone``...), falling back to the field name. Fields set to
    ``None`` are omitted, so ``offset=0`` is still sent. Values are not
    range-checked; the API validates them.
    """
    if options is None:
        return []
    params: list[tuple[str, str]] = []
    for name, field in type(options).model_fields.items():
        value = getattr(options, name)
        if value is None:
            continue
        params.append((field.serialization_alias or name, _stringify(value)))
    return params
