from typing import Optional, List
from sqlalchemy.ext.asyncio import AsyncSession

from retailpos.v1_0.models import Supplier
from retailpos.v1_0.schemas import SupplierCreate
from .base_repository import BaseRepository

class SupplierRepository(BaseRepository[Supplier]):
    def __init__(self) -> None:
        super().__init__(Supplier)

    async def create_supplier(
        self,
        payload: SupplierCreate,
        session: AsyncSession
    ) -> Supplier:
        """
        Create a Supplier from input schema and flush to assign PK.
        """
        entity = Supplier(
            trade_name=payload.trade_name,
            tax_id=payload.tax_id,
            phone=payload.phone,
        )
        await self.add(entity, session)
        return entity

    async def get_supplier_by_id(
        self,
        supplier_id: int,
        session: AsyncSession
    ) -> Optional[Supplier]:
        return await super().get_by_id(supplier_id, session)

    async def list_suppliers(
        self,
        session: AsyncSession
    ) -> List[Supplier]:
        """
        Return ALL suppliers ordered by trade_name ASC.
        """
        return await self.list_all(session, order_by=Supplier.trade_name.asc())
