"""The `MetaData` the cases and tasks tables are declared on.

Constraint and index names come from `NAMING_CONVENTION`, so the migration
and the table definitions agree on names such as ``uq_cases_case_number``
and ``fk_tasks_parent_case_id_cases``.
"""

from sqlalchemy import MetaData

NAMING_CONVENTION = {
    "pk": "pk_%(table_name)s",
    "fk": "fk_%(table_name)s_%(column_0_N_name)s_%(referred_table_name)s",
    "uq": "uq_%(table_name)s_%(column_0_N_name)s",
    "ix": "ix_%(table_name)s_%(column_0_N_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
}

metadata = MetaData(naming_convention=NAMING_CONVENTION)
