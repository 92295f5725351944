"""
graph_redactor.declare

Purpose:
    Class decorator that validates a redactable type when it is declared.

    Describing a type eagerly surfaces configuration errors (frozen types with
    sensitive fields, stacked markings, unresolvable annotations) at import
    time instead of on the first sanitize() call.

Created:
    2026-02-15
"""

from __future__ import annotations

from typing import TypeVar

from graph_redactor.fields import describe_fields

C = TypeVar("C", bound=type)


def redactable(cls: C) -> C:
    describe_fields(cls)
    return cls
