"""Stable contracts (options, error codes) shared across graph_redactor modules."""
