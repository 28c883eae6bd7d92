"""Pydantic Schemas - request/response validation for API endpoints.

Invariants:
    - Schemas check shape and types only; blank-field rules live in core/enforce_payload.py
      so HTTP and in-process callers get the same InvalidInputError

Design Decisions:
    - Separate from core dataclasses: schemas are API contracts, dataclasses are domain values
"""
