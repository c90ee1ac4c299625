"""Service layer for casework.

Implements application use-cases: command/query handlers, orchestration, and
transaction boundaries. Enforces the case/task invariants on top of the
repository ports.

Dependency rule: may import `casework.domain` and `casework.interfaces`, but
not `casework.adapters` or `casework.entrypoints`.
"""
