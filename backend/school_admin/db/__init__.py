"""Database Infrastructure — declarative Base shared by models and migrations.

Invariants:
    - Single async engine per process, owned by DatabaseSessionManager
    - All sessions are async (AsyncSession)
"""
