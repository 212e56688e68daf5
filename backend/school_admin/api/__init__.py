"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return the {success, data | message | error} envelope

Design Decisions:
    - Thin routes delegate to services
"""
