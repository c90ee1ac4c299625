"""Adapters (infrastructure) for casework.

Provide concrete implementations of the interface ports (relational and
in-memory repositories, units of work, ID generators, example-data sources),
plus persistence mapping and related wiring (engines, metadata, migrations).

Dependency rule: may import `casework.domain` and `casework.interfaces`; the
domain must not import this package.
"""
