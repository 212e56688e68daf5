"""School Admin Package — students, teachers and courses over a REST API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
