"""Infrastructure - database session manager, stores, clock, logging setup.

Invariants:
    - Implements the core Protocols (core/repository_protocols.py); core never imports this package
"""
