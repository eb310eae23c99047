"""Pydantic Schemas — request/response shapes for API endpoints.

Invariants:
    - Schemas check types only; registration rules live in core/enforce_user_fields

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""
