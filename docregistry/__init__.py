"""Document Registry Package - versioned document storage with soft delete.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
