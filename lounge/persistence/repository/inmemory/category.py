"""In-memory category repository for testing."""

from typing import Optional, Sequence

from lounge.domain.model.category import Category
from lounge.domain.repository.category import CategoryRepository
from lounge.domain.value import CategoryId


class InMemoryCategoryRepository(CategoryRepository):
    """In-memory implementation of CategoryRepository for testing."""

    def __init__(self) -> None:
        self._categories: dict[CategoryId, Category] = {}

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find a category by ID."""
        return self._categories.get(category_id)

    async def find_by_ids(self, category_ids: Sequence[CategoryId]) -> list[Category]:
        """Find multiple categories."""
        return [
            self._categories[cid]
            for cid in dict.fromkeys(category_ids)
            if cid in self._categories
        ]

    async def save(self, category: Category) -> Category:
        """Save or update a category."""
        self._categories[category.id] = category
        return category
