from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from retailpos.core.logger import logger
from retailpos.v1_0.repositories import CategoryRepository
from retailpos.v1_0.entities import CategoryDTO

class CategoryService:
    def __init__(self, category_repository: CategoryRepository) -> None:
        self.category_repository = category_repository

    async def list_all(self, db: AsyncSession) -> List[CategoryDTO]:
        logger.debug("[CategoryService] List all categories")
        async with db.begin():
            rows = await self.category_repository.list_categories(db)
        return [CategoryDTO(id=c.id, name=c.name) for c in rows]
