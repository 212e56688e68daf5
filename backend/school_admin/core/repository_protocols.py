"""Boundary Protocols — contracts between core rules and the persistence shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Identifiers reaching a repository are already parsed UUIDs
    - Repositories flush but never commit; the caller owns the transaction

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
"""

from typing import Any, Protocol
from uuid import UUID


class RecordRepository(Protocol):
    """Contract for one collection (students, teachers or courses)."""
    async def list(self, search: str | None = None) -> list[Any]: ...
    async def get(self, record_id: UUID) -> Any | None: ...
    async def create(self, values: dict) -> Any: ...
    async def update(self, record_id: UUID, values: dict) -> Any | None: ...
    async def delete(self, record_id: UUID) -> bool: ...
    async def find_conflict(
        self, attribute: str, value: object, exclude_id: UUID | None = None,
    ) -> Any | None: ...
    async def count(self) -> int: ...
