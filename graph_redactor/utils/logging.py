# graph_redactor/utils/logging.py
# Purpose: Shared logging helpers (logger factory + context adapter) for graph_redactor.
# Notes: Callers (the CLI, host applications) own handlers/format/level. This module must never print.

from __future__ import annotations

import logging
from typing import Any, Mapping


# Stable logger name prefix so host applications can filter on it.
LOGGER_NAMESPACE = "graph_redactor"


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return a namespaced logger. Does NOT configure handlers/levels.
    """
    if not name:
        return logging.getLogger(LOGGER_NAMESPACE)

    # __name__ of our own modules is already under the namespace.
    if name.startswith(LOGGER_NAMESPACE):
        return logging.getLogger(name)

    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


class ContextLoggerAdapter(logging.LoggerAdapter):
    """
    Prefix log messages with stable key=value context (owner=..., field=..., depth=...).
    """

    def __init__(self, logger: logging.Logger, extra: Mapping[str, Any] | None = None):
        super().__init__(logger, dict(extra or {}))

    def process(self, msg: str, kwargs: dict) -> tuple[str, dict]:
        extra = kwargs.get("extra") or {}
        merged = {**self.extra, **extra}

        if merged:
            ctx = " ".join(f"{k}={merged[k]}" for k in sorted(merged.keys()) if merged[k] is not None)
            msg = f"{ctx} | {msg}"

        kwargs["extra"] = {}
        return msg, kwargs


def with_ctx(logger: logging.Logger, ctx: Mapping[str, Any] | None = None) -> ContextLoggerAdapter:
    return ContextLoggerAdapter(logger, dict(ctx or {}))


def is_trace_enabled(logger: logging.Logger | logging.LoggerAdapter) -> bool:
    """
    Lightweight check used on the hot path to avoid building debug strings.
    """
    return logger.isEnabledFor(logging.DEBUG)
