"""
graph_redactor.errors

Purpose:
    Internal exception types for declaration-time configuration errors.
    Raised while a type is being described (decoration time or first use),
    never halfway through a graph walk.

Created:
    2026-02-15
"""

from __future__ import annotations

from dataclasses import dataclass

from graph_redactor.contracts.error_contract import RedactionErrorCode


@dataclass(eq=False)
class RedactionConfigError(Exception):
    error_code: RedactionErrorCode
    message: str
    owner: type | None = None
    field_name: str | None = None

    def __str__(self) -> str:
        if self.owner is not None and self.field_name:
            return f"{self.error_code.value}: {self.owner.__qualname__}.{self.field_name}: {self.message}"
        return f"{self.error_code.value}: {self.message}"
