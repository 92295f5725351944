"""
graph_redactor/cli/logging_setup.py

Purpose:
    Log wiring for the graph-redactor command.

Design Notes:
    - stdout carries only the command result (a field plan or redacted JSON),
      so it can be piped. Log records never go there.
    - The library logs describe/redact events at DEBUG under the
      "graph_redactor" namespace. --trace surfaces them, --quiet hides
      everything below ERROR.
    - The handler is attached to the root logger and replaces any earlier one,
      so repeated main() calls in one process do not duplicate lines.

Created:
    2026-02-15
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def cli_log_level(*, trace: bool = False, quiet: bool = False) -> int:
    # --quiet wins over --trace.
    if quiet:
        return logging.ERROR
    if trace:
        return logging.DEBUG
    return logging.WARNING


def setup_cli_logging(*, trace: bool = False, quiet: bool = False) -> None:
    level = cli_log_level(trace=trace, quiet=quiet)

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root.addHandler(handler)
    root.setLevel(level)
