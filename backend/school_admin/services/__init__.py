"""Services Layer — repositories, integrity coordinator and API-facing record services.

Invariants:
    - Repositories never commit; services commit once per operation
    - Kind-specific behaviour selected through explicit dict mappings (no auto-discovery)
"""
