from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession

from retailpos.v1_0.models import Category
from .base_repository import BaseRepository

class CategoryRepository(BaseRepository[Category]):
    def __init__(self) -> None:
        super().__init__(Category)

    async def get_category_by_id(
        self,
        category_id: int,
        session: AsyncSession
    ) -> Optional[Category]:
        return await super().get_by_id(category_id, session)

    async def list_categories(self, session: AsyncSession) -> List[Category]:
        return await self.list_all(session, order_by=Category.name.asc())
