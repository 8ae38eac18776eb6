"""Pydantic Schemas: response contracts for API endpoints.

Invariants:
    - Schemas describe the wire format; models/ describe persistence

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence (ADR: DDD boundary)
"""
