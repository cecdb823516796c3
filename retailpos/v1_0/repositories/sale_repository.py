from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession

from retailpos.v1_0.models import Sale
from retailpos.v1_0.schemas import SaleInsert
from .base_repository import BaseRepository

class SaleRepository(BaseRepository[Sale]):
    def __init__(self) -> None:
        super().__init__(Sale)

    async def create_sale(
        self,
        dto: SaleInsert,
        session: AsyncSession
    ) -> Sale:
        """
        Creates a new Sale from the DTO, adds it to the session,
        and flushes to assign its primary key without committing.
        """
        sale = Sale(**dto.model_dump())
        await self.add(sale, session)
        return sale

    async def get_by_id(
        self,
        sale_id: int,
        session: AsyncSession
    ) -> Optional[Sale]:
        return await super().get_by_id(sale_id, session)
