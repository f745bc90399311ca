"""
Product Repository Interface.
"""

from typing import Optional

from synergia.domain.repositories.base import BaseRepository
from synergia.domain.schemas.product import ProductRead


class ProductRepository(BaseRepository[ProductRead]):
    """Interface for Product-specific operations."""

    def get_by_code(self, codigo: str) -> Optional[ProductRead]:
        """Look a product up by its unique code."""
        ...
