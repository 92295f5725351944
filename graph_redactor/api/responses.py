"""
graph_redactor.api.responses

Purpose:
    FastAPI response class that redacts a typed payload before rendering.

Usage:
    @router.get("/accounts/{account_id}")
    def get_account(account_id: str) -> SanitizedJSONResponse:
        return SanitizedJSONResponse(load_account(account_id))

Notes:
    - Return the response object directly. With response_class=..., FastAPI
      converts the payload to plain dicts first, which drops the type
      declarations the sanitizer relies on.
    - Renders a sanitized copy, so objects shared with caches or sessions are
      left intact.

Created:
    2026-02-15
"""

from __future__ import annotations

from typing import Any, Mapping

from fastapi.responses import JSONResponse
from starlette.background import BackgroundTask

from graph_redactor.contracts.sanitize_policy import SanitizeOptions
from graph_redactor.serialization import to_json


class SanitizedJSONResponse(JSONResponse):
    def __init__(
        self,
        content: Any,
        status_code: int = 200,
        headers: Mapping[str, str] | None = None,
        media_type: str | None = None,
        background: BackgroundTask | None = None,
        *,
        options: SanitizeOptions | None = None,
    ) -> None:
        # Response.__init__ calls render(); options must be set first.
        self._options = options
        super().__init__(content, status_code, headers, media_type, background)

    def render(self, content: Any) -> bytes:
        return to_json(content, self._options, copy=True).encode("utf-8")
