"""ORM Models: SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Employee is the only entity

Design Decisions:
    - One file per entity for locality (ADR: ExMA max 3-4 files to understand a feature)
    - Models imported here so Base.metadata is complete for create_all and alembic
"""

from app.models.employee import Employee  # noqa: F401
