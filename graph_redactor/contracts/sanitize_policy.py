# graph_redactor/contracts/sanitize_policy.py
"""
graph_redactor.contracts.sanitize_policy

Purpose:
    Defines the per-call sanitization options.
    Centralizes the redaction token and the default depth limit.

Design Notes:
    - max_depth counts composite recursion levels from the root (depth 0).
    - Non-positive depths are valid and mean "visit nothing"; they are not errors.

Created:
    2026-02-15
"""

from __future__ import annotations

from dataclasses import dataclass

from graph_redactor.contracts.error_contract import RedactionErrorCode
from graph_redactor.errors import RedactionConfigError

REDACTED_TOKEN = "[REDACTED]"
DEFAULT_MAX_DEPTH = 3


@dataclass(frozen=True)
class SanitizeOptions:
    max_depth: int = DEFAULT_MAX_DEPTH
    redaction_token: str = REDACTED_TOKEN

    def __post_init__(self) -> None:
        # bool is an int subclass; reject it explicitly.
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise RedactionConfigError(
                error_code=RedactionErrorCode.INVALID_OPTIONS,
                message=f"max_depth must be an int, got {type(self.max_depth).__name__}",
            )
        if not isinstance(self.redaction_token, str) or not self.redaction_token:
            raise RedactionConfigError(
                error_code=RedactionErrorCode.INVALID_OPTIONS,
                message="redaction_token must be a non-empty string",
            )

    def with_depth(self, max_depth: int) -> "SanitizeOptions":
        return SanitizeOptions(max_depth=max_depth, redaction_token=self.redaction_token)
