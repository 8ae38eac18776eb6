"""Services Layer: orchestrates pure core logic around repository IO.

Invariants:
    - Services depend on core/ protocols, never on SQLAlchemy directly

Design Decisions:
    - Impureim sandwich: validate (pure) -> persist (IO) -> return (ADR: ExMA)
"""
