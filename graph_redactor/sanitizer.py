"""
graph_redactor.sanitizer

Purpose:
    Depth-bounded, in-place redaction of sensitive fields across a typed
    object graph, run before the graph is handed to a serializer.

Algorithm (per object, depth budget `max_depth`):
    1. None or max_depth <= 0: stop.
    2. For each field of the object's runtime type:
       a. sensitive  -> replace with the redaction value for the declared type
                        (token for text, zero value otherwise). Sensitive
                        composites are replaced wholesale, never visited.
       b. leaf       -> leave unchanged.
       c. composite  -> if the current value is set, recurse with max_depth - 1.

Design Notes:
    - IN-PLACE: the caller's graph is mutated. Anything else holding references
      to the same objects observes the redaction. Use sanitized_copy() to keep
      the original intact.
    - NO CYCLE DETECTION: an object reachable from itself is re-visited on every
      encounter until the depth budget runs out. The depth bound is the only
      termination guarantee, so keep it small for self-referential models.
    - Python values are references, so a recursed child is already mutated in
      place and needs no write-back.
    - TWO PASSES: every type reachable within the depth budget is described
      (and so validated) before the first field is written. A configuration
      error deep in the graph leaves the whole graph untouched.
    - Not thread-safe for a shared graph; no locking is done here.

Created:
    2026-02-15
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, TypeVar

from graph_redactor.classifier import TypeKind
from graph_redactor.config.settings import get_settings
from graph_redactor.contracts.sanitize_policy import SanitizeOptions
from graph_redactor.fields import describe_fields
from graph_redactor.markers import redaction_value
from graph_redactor.resolver import is_sensitive
from graph_redactor.utils.logging import get_logger, is_trace_enabled, with_ctx

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class SanitizeStats:
    visited: int = 0
    redacted: int = 0


class GraphSanitizer:
    def __init__(self, options: SanitizeOptions | None = None) -> None:
        self._options = options if options is not None else get_settings().options()
        self.last_stats = SanitizeStats()

    @property
    def options(self) -> SanitizeOptions:
        return self._options

    def sanitize(self, value: Any, max_depth: int | None = None) -> None:
        """
        Redact `value` in place. Returns nothing; the same object is mutated.

        `max_depth` overrides the configured depth for this call only and is
        validated like SanitizeOptions.max_depth.
        """
        options = self._options if max_depth is None else self._options.with_depth(max_depth)
        depth = options.max_depth

        self._check(value, depth)

        stats = SanitizeStats()
        self._walk(value, depth, 0, stats)
        self.last_stats = stats

        if is_trace_enabled(logger):
            logger.debug(
                "sanitized root=%s max_depth=%d visited=%d redacted=%d",
                type(value).__qualname__,
                depth,
                stats.visited,
                stats.redacted,
            )

    def _check(self, value: Any, max_depth: int) -> None:
        # Same traversal as _walk, read-only. Raises RedactionConfigError for
        # any reachable type that cannot be redacted.
        if value is None or max_depth <= 0:
            return

        for field in describe_fields(type(value)):
            if is_sensitive(field) or field.kind is TypeKind.LEAF:
                continue
            child = field.get(value)
            if child is not None:
                self._check(child, max_depth - 1)

    def _walk(self, value: Any, max_depth: int, level: int, stats: SanitizeStats) -> None:
        if value is None or max_depth <= 0:
            return

        stats.visited += 1
        token = self._options.redaction_token

        for field in describe_fields(type(value)):
            if is_sensitive(field):
                field.set(value, redaction_value(field.annotation, token))
                stats.redacted += 1
                if is_trace_enabled(logger):
                    with_ctx(logger, {"owner": field.owner.__qualname__, "field": field.name, "depth": level}).debug(
                        "redacted"
                    )
                continue

            if field.kind is TypeKind.LEAF:
                continue

            # Zero value of a composite declaration is None.
            child = field.get(value)
            if child is None:
                continue

            self._walk(child, max_depth - 1, level + 1, stats)


# Process-wide instance
_SANITIZER: GraphSanitizer | None = None


def get_sanitizer() -> GraphSanitizer:
    """Return the process-wide sanitizer, built from settings on first use."""
    global _SANITIZER
    if _SANITIZER is None:
        _SANITIZER = GraphSanitizer()
    return _SANITIZER


def reset_sanitizer() -> None:
    """Drop the process-wide sanitizer so the next call re-reads settings."""
    global _SANITIZER
    _SANITIZER = None


def sanitize(value: Any, options: SanitizeOptions | None = None) -> None:
    if options is None:
        get_sanitizer().sanitize(value)
    else:
        GraphSanitizer(options).sanitize(value)


def sanitized_copy(value: T, options: SanitizeOptions | None = None) -> T:
    """Deep-copy `value`, sanitize the copy and return it. The original is untouched."""
    clone = copy.deepcopy(value)
    sanitize(clone, options)
    return clone


__all__ = [
    "GraphSanitizer",
    "SanitizeStats",
    "get_sanitizer",
    "reset_sanitizer",
    "sanitize",
    "sanitized_copy",
]
