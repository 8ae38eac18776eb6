"""Database Metadata: SQLAlchemy declarative Base shared by models and migrations.

Invariants:
    - No engine or session here (see infrastructure/database.py)
"""
