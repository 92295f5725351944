"""
graph_redactor.classifier

Purpose:
    Decides, for a declared field type, whether the sanitizer treats it as a
    LEAF (atomic, never recursed into) or a COMPOSITE (its fields are visited).

Design Notes:
    - Closed classification over a finite set of leaf identities plus the
      Optional/Annotated/NewType unwrapping rules. No open-ended runtime probing.
    - Subclasses of leaf types are leaves (e.g. `class Email(str)`).
    - Anything not recognized is COMPOSITE. An unfamiliar runtime value simply
      has no enumerable fields, so visiting it is a no-op.
    - Results are cached per type; correctness does not depend on the cache.

Created:
    2026-02-15
"""

from __future__ import annotations

import datetime as dt
import types
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Literal, Union, get_args, get_origin
from uuid import UUID

NoneType = type(None)


class TypeKind(str, Enum):
    LEAF = "leaf"
    COMPOSITE = "composite"


# Order is irrelevant for issubclass checks; datetime is a date subclass anyway.
LEAF_TYPES: tuple[type, ...] = (
    str,
    bytes,
    bool,
    int,
    float,
    complex,
    Decimal,
    dt.datetime,
    dt.date,
    dt.time,
    dt.timedelta,
    UUID,
    NoneType,
)

_UNION_ORIGINS = (Union, types.UnionType)

_CACHE: dict[Any, TypeKind] = {}


def strip_annotated(tp: Any) -> Any:
    while get_origin(tp) is Annotated:
        tp = get_args(tp)[0]
    return tp


def is_optional(tp: Any) -> bool:
    tp = strip_annotated(tp)
    return get_origin(tp) in _UNION_ORIGINS and NoneType in get_args(tp)


def unwrap_optional(tp: Any) -> Any:
    """
    Strip Annotated, NewType and single-member Optional layers.

    A union with more than one non-None member is returned as-is.
    """
    while True:
        tp = strip_annotated(tp)
        if get_origin(tp) in _UNION_ORIGINS:
            members = [a for a in get_args(tp) if a is not NoneType]
            if len(members) == 1:
                tp = members[0]
                continue
            return tp
        supertype = getattr(tp, "__supertype__", None)
        if supertype is not None:
            tp = supertype
            continue
        return tp


def is_plain_class(tp: Any) -> bool:
    # Parameterized generics (list[int]) pass isinstance(.., type) on some versions.
    return isinstance(tp, type) and get_origin(tp) is None


def _is_leaf_class(tp: Any) -> bool:
    return is_plain_class(tp) and (issubclass(tp, Enum) or issubclass(tp, LEAF_TYPES))


def _classify(tp: Any) -> TypeKind:
    inner = unwrap_optional(tp)

    if inner is None or get_origin(inner) is Literal:
        return TypeKind.LEAF

    if _is_leaf_class(inner):
        return TypeKind.LEAF

    return TypeKind.COMPOSITE


def classify(tp: Any) -> TypeKind:
    try:
        cached = _CACHE.get(tp)
    except TypeError:
        # Unhashable annotation (e.g. Annotated with dict metadata): skip the cache.
        return _classify(tp)

    if cached is None:
        cached = _classify(tp)
        _CACHE[tp] = cached
    return cached


def is_leaf(tp: Any) -> bool:
    return classify(tp) is TypeKind.LEAF


def is_text(tp: Any) -> bool:
    """
    True for text-like leaf types: str and its subclasses, optionally wrapped.

    str-valued enums are excluded; their redaction value is None, not the token.
    """
    inner = unwrap_optional(tp)
    return is_plain_class(inner) and issubclass(inner, str) and not issubclass(inner, Enum)


def clear_cache() -> None:
    _CACHE.clear()
