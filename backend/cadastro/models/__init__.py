"""ORM Models — SQLAlchemy declarative models for persisted entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - Models imported here so Base.metadata is complete before create_all runs
"""

from cadastro.models.user import User  # noqa: F401
