"""
Base Repository Interface.
Defines the contract every entity collection honours.
"""

from typing import Any, List, Optional, Protocol, TypeVar

T = TypeVar("T")


class BaseRepository(Protocol[T]):
    """Interface for one entity collection."""

    def add(self, record: Any) -> int:
        """Insert a new record, ignoring any id on input. Returns the assigned id."""
        ...

    def get(self, id: int) -> Optional[T]:
        """Snapshot of one record, or None when absent."""
        ...

    def get_all(self) -> List[T]:
        """Snapshots of every record, ordered by id."""
        ...

    def update(self, record: Any) -> None:
        """Replace the record with the same id. Raises EntityNotFoundException if absent."""
        ...

    def delete(self, id: int) -> None:
        """Remove one record. Raises EntityNotFoundException if absent."""
        ...

    def clear(self) -> None:
        """Remove every record of the collection."""
        ...

    def insert_snapshot(self, record: Any) -> int:
        """Insert keeping the record's own id when present (restore only)."""
        ...
