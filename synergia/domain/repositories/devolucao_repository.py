"""
Devolucao Repository Interface.
Returns own their line items; items are only reachable through the parent.
"""

from typing import Any, List, Sequence

from synergia.domain.repositories.base import BaseRepository
from synergia.domain.schemas.devolucao import DevolucaoRead, ItemDevolucaoRead


class DevolucaoRepository(BaseRepository[DevolucaoRead]):
    """Interface for Devolucao-specific operations."""

    def add_devolucao(self, parent: Any, itens: Sequence[Any]) -> int:
        """Persist parent and items together. Returns the parent id."""
        ...

    def update_devolucao(self, parent: Any, itens: Sequence[Any]) -> None:
        """Update the parent and replace its whole item list."""
        ...

    def list_itens(self, devolucao_id: int) -> List[ItemDevolucaoRead]:
        """Read-only view of the items of one return."""
        ...
