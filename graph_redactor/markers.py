"""
graph_redactor.markers

Purpose:
    Declaration-time sensitivity markers and the redaction values substituted
    for sensitive fields.

Usage:
    Pydantic models and dataclasses mark a field with the Annotated extra:

        class Account(BaseModel):
            login: str
            password: Annotated[str, SENSITIVE]

    or with the field helpers:

        password: str = SensitiveField(default="")           # pydantic
        password: str = sensitive_field(default="")          # dataclasses

    Only the outermost Annotated layer is inspected, so write
    `Annotated[Optional[str], SENSITIVE]` rather than `Optional[Annotated[...]]`.

Design Notes:
    - Text-like fields are replaced by the redaction token.
    - Everything else gets its type's zero value. There is no generic masked
      form for an int, a date or a nested model.

Created:
    2026-02-15
"""

from __future__ import annotations

import dataclasses
import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Any, Callable
from uuid import UUID

from pydantic import Field

from graph_redactor.classifier import is_optional, is_plain_class, is_text, unwrap_optional

SENSITIVE_METADATA_KEY = "sensitive"


class Sensitive:
    """Annotated[...] extra flagging a field declaration for redaction."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "SENSITIVE"


SENSITIVE = Sensitive()


def sensitive_field(**kwargs: Any) -> Any:
    """dataclasses.field() with the sensitivity flag set in its metadata."""
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[SENSITIVE_METADATA_KEY] = True
    return dataclasses.field(metadata=metadata, **kwargs)


def SensitiveField(default: Any = ..., **kwargs: Any) -> Any:  # noqa: N802 (mirrors pydantic.Field)
    """pydantic.Field() with the sensitivity flag set in json_schema_extra."""
    extra = kwargs.pop("json_schema_extra", None)
    if callable(extra):
        raise TypeError("SensitiveField does not support callable json_schema_extra")
    extra = dict(extra or {})
    extra[SENSITIVE_METADATA_KEY] = True
    return Field(default, json_schema_extra=extra, **kwargs)


def count_markers(metadata: Any) -> int:
    return sum(1 for m in metadata if isinstance(m, Sensitive))


# bool must precede int, datetime must precede date.
_ZERO_VALUES: tuple[tuple[type, Callable[[], Any]], ...] = (
    (bool, lambda: False),
    (int, lambda: 0),
    (float, lambda: 0.0),
    (complex, lambda: 0j),
    (Decimal, lambda: Decimal(0)),
    (bytes, lambda: b""),
    (dt.datetime, lambda: dt.datetime.min),
    (dt.date, lambda: dt.date.min),
    (dt.time, lambda: dt.time.min),
    (dt.timedelta, lambda: dt.timedelta(0)),
    (UUID, lambda: UUID(int=0)),
)


def zero_value(tp: Any) -> Any:
    """
    Zero/default value for a declared type.

    Optional types, enums, composites and anything unrecognized map to None.
    """
    if is_optional(tp):
        return None

    inner = unwrap_optional(tp)
    if not is_plain_class(inner) or issubclass(inner, Enum):
        return None

    for base, factory in _ZERO_VALUES:
        if issubclass(inner, base):
            return factory()
    if issubclass(inner, str):
        return ""
    return None


def redaction_value(tp: Any, token: str) -> Any:
    if is_text(tp):
        return token
    return zero_value(tp)
