"""Category repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from lounge.domain.model.category import Category
from lounge.domain.value import CategoryId


class CategoryRepository(ABC):
    """Read access to media categories."""

    @abstractmethod
    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find a category by ID."""
        pass

    @abstractmethod
    async def find_by_ids(self, category_ids: Sequence[CategoryId]) -> List[Category]:
        """Find multiple categories in a single query.

        Args:
            category_ids: Category IDs to load

        Returns:
            Found categories (may be fewer than requested)
        """
        pass

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """Save or update a category (used by fixtures and seeding)."""
        pass
