"""
graph_redactor.fields

Purpose:
    Enumerates the named, typed fields of a composite type as FieldDescriptor
    records (declared type, LEAF/COMPOSITE kind, sensitivity).

Role in system:
    The single place that knows how pydantic models and dataclasses expose
    their fields. The sanitizer only ever talks to FieldDescriptor.

Design Notes:
    - Descriptors are built once per runtime type and cached.
    - Types that are neither pydantic models nor dataclasses have no fields;
      visiting their instances is a no-op.
    - Write access is checked here, at describe time. A sensitive field that
      cannot be assigned (frozen dataclass, frozen model, frozen pydantic field)
      raises RedactionConfigError before any instance of the type is touched.
    - pydantic instances are written through their __dict__. validate_assignment
      would reject redaction values that violate field constraints (ge=, max_length=).

Created:
    2026-02-15
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from graph_redactor.classifier import TypeKind, classify, strip_annotated
from graph_redactor.contracts.error_contract import RedactionErrorCode
from graph_redactor.errors import RedactionConfigError
from graph_redactor.resolver import is_pydantic_model, resolve_sensitivity, resolved_hints
from graph_redactor.utils.logging import get_logger, is_trace_enabled

logger = get_logger(__name__)

_DESCRIPTORS: dict[type, tuple["FieldDescriptor", ...]] = {}


@dataclass(frozen=True)
class FieldDescriptor:
    owner: type
    name: str
    annotation: Any
    kind: TypeKind
    sensitive: bool

    def get(self, obj: Any) -> Any:
        return getattr(obj, self.name, None)

    def set(self, obj: Any, value: Any) -> None:
        if is_pydantic_model(self.owner):
            # Redaction values need not satisfy the field constraints, so skip
            # validate_assignment and write the instance dict directly.
            obj.__dict__[self.name] = value
            return
        setattr(obj, self.name, value)


def _raw_fields(cls: type) -> list[tuple[str, Any]]:
    if is_pydantic_model(cls):
        return [(name, info.annotation) for name, info in cls.model_fields.items()]

    if dataclasses.is_dataclass(cls):
        hints = resolved_hints(cls)
        return [(f.name, strip_annotated(hints.get(f.name, f.type))) for f in dataclasses.fields(cls)]

    return []


def _read_only_reason(cls: type, name: str) -> str | None:
    if is_pydantic_model(cls):
        if cls.model_config.get("frozen"):
            return "model is frozen"
        info = cls.model_fields.get(name)
        if info is not None and info.frozen:
            return "field is frozen"
        return None

    if dataclasses.is_dataclass(cls) and cls.__dataclass_params__.frozen:
        return "dataclass is frozen"

    return None


def field_names(cls: type) -> frozenset[str]:
    return frozenset(name for name, _ in _raw_fields(cls))


def describe_fields(cls: type) -> tuple[FieldDescriptor, ...]:
    cached = _DESCRIPTORS.get(cls)
    if cached is not None:
        return cached

    descriptors = tuple(
        FieldDescriptor(
            owner=cls,
            name=name,
            annotation=annotation,
            kind=classify(annotation),
            sensitive=resolve_sensitivity(cls, name),
        )
        for name, annotation in _raw_fields(cls)
    )

    for d in descriptors:
        if not d.sensitive:
            continue
        reason = _read_only_reason(cls, d.name)
        if reason is not None:
            raise RedactionConfigError(
                error_code=RedactionErrorCode.READ_ONLY_FIELD,
                message=f"sensitive field cannot be redacted in place ({reason})",
                owner=cls,
                field_name=d.name,
            )

    if is_trace_enabled(logger) and descriptors:
        logger.debug(
            "described type=%s fields=%d sensitive=%s",
            cls.__qualname__,
            len(descriptors),
            [d.name for d in descriptors if d.sensitive],
        )

    _DESCRIPTORS[cls] = descriptors
    return descriptors


def clear_cache() -> None:
    _DESCRIPTORS.clear()
