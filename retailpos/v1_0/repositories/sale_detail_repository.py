from typing import List, Sequence
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from retailpos.v1_0.models import SaleDetail, Product
from retailpos.v1_0.schemas import SaleDetailCreate
from .base_repository import BaseRepository

class SaleDetailRepository(BaseRepository[SaleDetail]):
    def __init__(self) -> None:
        super().__init__(SaleDetail)

    async def bulk_insert_details(
        self,
        payloads: Sequence[SaleDetailCreate],
        session: AsyncSession,
    ) -> List[SaleDetail]:
        """
        Bulk insert SaleDetail rows, preserving input order in their ids.
        """
        objects = [
            SaleDetail(
                sale_id=p.sale_id,
                product_id=p.product_id,
                quantity=p.quantity,
                unit_price=p.unit_price,
            )
            for p in payloads
        ]
        return await self.add_many(objects, session)

    async def list_receipt_lines(
        self,
        sale_id: int,
        session: AsyncSession,
    ) -> List[dict]:
        """
        Detail rows of a sale joined with the product's current name/SKU.
        Returns: [{ quantity, unit_price, product_name, sku }, ...]
        """
        stmt = (
            select(
                SaleDetail.quantity,
                SaleDetail.unit_price,
                Product.name.label("product_name"),
                Product.sku,
            )
            .join(Product, Product.id == SaleDetail.product_id)
            .where(SaleDetail.sale_id == sale_id)
            .order_by(SaleDetail.id.asc())
        )
        rows = (await session.execute(stmt)).mappings().all()
        return [dict(r) for r in rows]
