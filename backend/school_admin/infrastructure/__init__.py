"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Infrastructure never imports domain rules from core/ beyond error types
"""
