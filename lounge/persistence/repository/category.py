"""PostgreSQL implementation of Category repository."""

from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from lounge.domain.model import Category
from lounge.domain.repository import CategoryRepository
from lounge.domain.value import CategoryId
from lounge.persistence.mappers import category_to_dict, row_to_category
from lounge.persistence.tables import categories_table


class PostgresCategoryRepository(CategoryRepository):
    """PostgreSQL implementation of CategoryRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, category_id: CategoryId) -> Optional[Category]:
        """Find a category by ID."""
        stmt = select(categories_table).where(categories_table.c.id == category_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_category(row._asdict()) if row else None

    async def find_by_ids(self, category_ids: Sequence[CategoryId]) -> List[Category]:
        """Find multiple categories in a single query."""
        if not category_ids:
            return []
        stmt = select(categories_table).where(categories_table.c.id.in_(category_ids))
        result = await self.session.execute(stmt)
        return [row_to_category(row._asdict()) for row in result.fetchall()]

    async def save(self, category: Category) -> Category:
        """Insert or update a category."""
        data = category_to_dict(category)
        stmt = insert(categories_table).values(**data)
        stmt = stmt.on_conflict_do_update(
            index_elements=[categories_table.c.id],
            set_={"name": stmt.excluded.name, "type": stmt.excluded.type},
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return category
