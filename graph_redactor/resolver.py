"""
graph_redactor.resolver

Purpose:
    Decides whether a field declaration carries the sensitivity marking.

Marking sources (exactly one per declaration):
    - `Annotated[T, SENSITIVE]`
    - `SensitiveField(...)` (pydantic) / `sensitive_field(...)` (dataclasses)
    - the explicit registration table (`register_sensitive`), for types whose
      source cannot be annotated

Design Notes:
    - Inherited: if any class in the owner's MRO declares the field sensitive,
      the field stays sensitive on every subclass, including subclasses that
      re-declare it without the marking.
    - Markings do not stack. Two markings on one declaration are a
      configuration error.
    - Depends only on declarations, never on instance values.

Created:
    2026-02-15
"""

from __future__ import annotations

import dataclasses
import inspect
import typing
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from graph_redactor.contracts.error_contract import RedactionErrorCode
from graph_redactor.errors import RedactionConfigError
from graph_redactor.markers import SENSITIVE_METADATA_KEY, count_markers
from graph_redactor.utils.logging import get_logger

if TYPE_CHECKING:
    from graph_redactor.fields import FieldDescriptor

logger = get_logger(__name__)

_REGISTRY: dict[type, set[str]] = {}
_CACHE: dict[tuple[type, str], bool] = {}


def is_pydantic_model(cls: Any) -> bool:
    return isinstance(cls, type) and issubclass(cls, BaseModel) and cls is not BaseModel


def resolved_hints(cls: type) -> dict[str, Any]:
    """
    Return fully resolved annotations (with Annotated extras) for a dataclass.

    Raises RedactionConfigError when a string annotation cannot be resolved;
    the field could not be classified or checked for markings otherwise.
    """
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except (NameError, TypeError) as e:
        raise RedactionConfigError(
            error_code=RedactionErrorCode.UNRESOLVED_ANNOTATION,
            message=f"cannot resolve annotations: {e}",
            owner=cls,
        ) from e


def _own_annotations(klass: type) -> dict[str, Any]:
    try:
        return inspect.get_annotations(klass)
    except TypeError:
        return {}


def _declared_marking_count(klass: type, name: str) -> int:
    """Number of markings carried by `klass`'s own declaration of `name`."""
    count = 0

    if name in _own_annotations(klass):
        if is_pydantic_model(klass):
            info = klass.model_fields.get(name)
            if info is not None:
                count += count_markers(info.metadata)
                extra = info.json_schema_extra
                if isinstance(extra, dict) and extra.get(SENSITIVE_METADATA_KEY) is True:
                    count += 1
        elif dataclasses.is_dataclass(klass):
            hint = resolved_hints(klass).get(name)
            if typing.get_origin(hint) is typing.Annotated:
                count += count_markers(hint.__metadata__)
            dc_field = klass.__dataclass_fields__.get(name)
            if dc_field is not None and dc_field.metadata.get(SENSITIVE_METADATA_KEY) is True:
                count += 1

    if name in _REGISTRY.get(klass, ()):
        count += 1

    return count


def _resolve(owner: type, name: str) -> bool:
    sensitive = False
    for klass in owner.__mro__:
        count = _declared_marking_count(klass, name)
        if count > 1:
            raise RedactionConfigError(
                error_code=RedactionErrorCode.STACKED_MARKING,
                message=f"field is marked sensitive {count} times on {klass.__qualname__}; use exactly one marking",
                owner=owner,
                field_name=name,
            )
        if count == 1:
            sensitive = True
    return sensitive


def resolve_sensitivity(owner: type, name: str) -> bool:
    key = (owner, name)
    cached = _CACHE.get(key)
    if cached is None:
        cached = _resolve(owner, name)
        _CACHE[key] = cached
    return cached


def is_sensitive(field: "FieldDescriptor") -> bool:
    return resolve_sensitivity(field.owner, field.name)


def register_sensitive(cls: type, *names: str) -> None:
    """
    Mark fields of `cls` sensitive without touching its declaration.

    The marking is inherited by subclasses like any other marking.
    """
    # Local import: fields imports this module.
    from graph_redactor.fields import clear_cache as clear_field_cache
    from graph_redactor.fields import field_names

    known = field_names(cls)
    for name in names:
        if name not in known:
            raise RedactionConfigError(
                error_code=RedactionErrorCode.UNKNOWN_FIELD,
                message="no such field to register as sensitive",
                owner=cls,
                field_name=name,
            )

    _REGISTRY.setdefault(cls, set()).update(names)
    logger.debug("registered sensitive fields owner=%s fields=%s", cls.__qualname__, sorted(names))

    _CACHE.clear()
    clear_field_cache()


def unregister_sensitive(cls: type) -> None:
    from graph_redactor.fields import clear_cache as clear_field_cache

    if _REGISTRY.pop(cls, None) is not None:
        _CACHE.clear()
        clear_field_cache()


def clear_cache() -> None:
    _CACHE.clear()
