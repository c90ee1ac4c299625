"""Interfaces (application boundary) for casework.

Defines framework-free application contracts: ABCs and small DTOs shared by
the service layer and adapters (repositories, units of work, ID generators,
example-data sources). Business rules stay out of this package.

Dependency rule: may import `casework.domain` for entity and value types, but
nothing from `casework.adapters`, `casework.service_layer` or
`casework.entrypoints`.
"""
