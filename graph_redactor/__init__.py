"""
graph_redactor

Purpose:
    Redacts sensitive fields of typed object graphs (pydantic models,
    dataclasses) in place, before the graph is handed to a serializer.
"""

from graph_redactor.classifier import TypeKind, classify
from graph_redactor.contracts.error_contract import RedactionErrorCode
from graph_redactor.contracts.sanitize_policy import REDACTED_TOKEN, SanitizeOptions
from graph_redactor.declare import redactable
from graph_redactor.errors import RedactionConfigError
from graph_redactor.fields import FieldDescriptor, describe_fields
from graph_redactor.markers import SENSITIVE, Sensitive, SensitiveField, sensitive_field
from graph_redactor.resolver import is_sensitive, register_sensitive, unregister_sensitive
from graph_redactor.sanitizer import GraphSanitizer, sanitize, sanitized_copy
from graph_redactor.serialization import to_json, to_jsonable

__version__ = "0.1.0"

__all__ = [
    "REDACTED_TOKEN",
    "SENSITIVE",
    "FieldDescriptor",
    "GraphSanitizer",
    "RedactionConfigError",
    "RedactionErrorCode",
    "SanitizeOptions",
    "Sensitive",
    "SensitiveField",
    "TypeKind",
    "classify",
    "describe_fields",
    "is_sensitive",
    "redactable",
    "register_sensitive",
    "sanitize",
    "sanitized_copy",
    "sensitive_field",
    "to_json",
    "to_jsonable",
    "unregister_sensitive",
]
