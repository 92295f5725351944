# graph_redactor/serialization.py
"""
graph_redactor.serialization

Purpose:
    Hands a sanitized graph to the generic serializer (pydantic).
    Sanitization always happens first; the serializer never sees raw values.

Design Notes:
    - copy=False (default) follows the in-place contract and redacts the
      caller's graph. copy=True serializes a sanitized deep copy instead.
    - Serializer warnings are disabled: a redacted composite is None even when
      its declared type is not Optional, which pydantic would otherwise warn about.

Created:
    2026-02-15
"""

from __future__ import annotations

from typing import Any

from pydantic import TypeAdapter

from graph_redactor.contracts.sanitize_policy import SanitizeOptions
from graph_redactor.sanitizer import sanitize, sanitized_copy


def _prepare(value: Any, options: SanitizeOptions | None, copy: bool) -> Any:
    if copy:
        return sanitized_copy(value, options)
    sanitize(value, options)
    return value


def to_jsonable(value: Any, options: SanitizeOptions | None = None, *, copy: bool = False) -> Any:
    target = _prepare(value, options, copy)
    return TypeAdapter(type(target)).dump_python(target, mode="json", warnings=False)


def to_json(
    value: Any,
    options: SanitizeOptions | None = None,
    *,
    copy: bool = False,
    indent: int | None = None,
) -> str:
    target = _prepare(value, options, copy)
    raw = TypeAdapter(type(target)).dump_json(target, indent=indent, warnings=False)
    return raw.decode("utf-8")
