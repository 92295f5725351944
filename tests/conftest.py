"""
tests.conftest

Shared pytest fixtures for graph_redactor tests.
"""

from __future__ import annotations

import pytest

from graph_redactor import classifier, fields, resolver
from graph_redactor.sanitizer import reset_sanitizer


@pytest.fixture(autouse=True)
def _fresh_state(monkeypatch):
    """
    Every test starts from empty caches, an empty registration table and a
    sanitizer built from default settings.
    """
    monkeypatch.delenv("GRAPH_REDACTOR_MAX_DEPTH", raising=False)
    monkeypatch.delenv("GRAPH_REDACTOR_TOKEN", raising=False)
    reset_sanitizer()
    yield
    for cls in list(resolver._REGISTRY):
        resolver.unregister_sensitive(cls)
    classifier.clear_cache()
    resolver.clear_cache()
    fields.clear_cache()
    reset_sanitizer()
