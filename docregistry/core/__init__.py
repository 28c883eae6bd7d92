"""Core Layer - pure document lifecycle logic, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Lifecycle transitions are pure: they return new Document values
"""
