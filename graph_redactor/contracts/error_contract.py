"""
graph_redactor.contracts.error_contract

Purpose:
    Stable error codes for declaration/configuration problems.
    Every code describes a structural problem with a type declaration or with
    the options; none of them is transient, so nothing is ever retried.

Created:
    2026-02-15
"""

from __future__ import annotations

from enum import Enum


class RedactionErrorCode(str, Enum):
    # Declarations
    READ_ONLY_FIELD = "READ_ONLY_FIELD"
    STACKED_MARKING = "STACKED_MARKING"
    UNRESOLVED_ANNOTATION = "UNRESOLVED_ANNOTATION"
    UNKNOWN_FIELD = "UNKNOWN_FIELD"

    # Options
    INVALID_OPTIONS = "INVALID_OPTIONS"
