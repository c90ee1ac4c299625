"""Domain layer for casework.

Contains business rules: the Case and Task entities, value objects for
pagination, the allow-listed property updates, parsers for boundary values,
and the domain error hierarchy. This package is deliberately
technology-agnostic.

Dependency rule: do not import from `casework.adapters` or `casework.entrypoints`.
"""
