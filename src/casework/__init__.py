"""casework

A case-management backend core. Cases are the aggregate root and own Tasks;
the package covers the relational model, its integrity constraints, search,
pagination, and single-field updates for both entity types.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
