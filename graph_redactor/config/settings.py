# graph_redactor/config/settings.py
"""
graph_redactor.config.settings

Purpose:
    Centralized configuration for process-wide sanitization defaults.
    Per-call SanitizeOptions override these; callers that pass nothing get
    the values from here.

Created:
    2026-02-15
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field, field_validator

from graph_redactor.contracts.sanitize_policy import DEFAULT_MAX_DEPTH, REDACTED_TOKEN, SanitizeOptions

ENV_MAX_DEPTH = "GRAPH_REDACTOR_MAX_DEPTH"
ENV_TOKEN = "GRAPH_REDACTOR_TOKEN"


class Settings(BaseModel):
    default_max_depth: int = Field(default=DEFAULT_MAX_DEPTH)
    redaction_token: str = Field(default=REDACTED_TOKEN, min_length=1)

    @field_validator("redaction_token")
    @classmethod
    def validate_token(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Redaction token must not be blank.")
        return v

    def options(self) -> SanitizeOptions:
        return SanitizeOptions(max_depth=self.default_max_depth, redaction_token=self.redaction_token)


def get_settings() -> Settings:
    values: dict[str, object] = {}

    raw_depth = os.getenv(ENV_MAX_DEPTH)
    if raw_depth is not None and raw_depth.strip():
        values["default_max_depth"] = raw_depth.strip()

    raw_token = os.getenv(ENV_TOKEN)
    if raw_token:
        values["redaction_token"] = raw_token

    return Settings(**values)
