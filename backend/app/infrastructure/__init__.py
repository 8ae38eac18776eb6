"""Infrastructure Layer: database access and cross-cutting concerns.

Invariants:
    - Driver and SQLAlchemy exceptions never escape this layer unmapped
    - Logging configuration lives here, not in core/

Design Decisions:
    - Repository adapters implement core/repository_protocols.py
"""
