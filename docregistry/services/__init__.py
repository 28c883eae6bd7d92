"""Services - imperative shell around the pure core.

Invariants:
    - Services receive their IO collaborators by injection, never construct them
"""
