from decimal import Decimal

from sqlalchemy import update, func, Numeric, literal
from sqlalchemy.ext.asyncio import AsyncSession

from retailpos.v1_0.models import CostPrice
from .base_repository import BaseRepository

class CostPriceRepository(BaseRepository[CostPrice]):
    def __init__(self) -> None:
        super().__init__(CostPrice)

    async def create_cost_price(
        self,
        *,
        product_id: int,
        supplier_id: int,
        cost: Decimal,
        margin_percentage: Decimal,
        sale_price: Decimal,
        session: AsyncSession,
    ) -> CostPrice:
        entity = CostPrice(
            product_id=product_id,
            supplier_id=supplier_id,
            cost=cost,
            margin_percentage=margin_percentage,
            sale_price=sale_price,
        )
        await self.add(entity, session)
        return entity

    async def reprice_by_supplier(
        self,
        supplier_id: int,
        percentage: Decimal,
        session: AsyncSession,
    ) -> int:
        """
        One set-based UPDATE over every cost row of the supplier:

            cost       = ROUND(cost * f, 2)
            sale_price = ROUND(cost * f * (1 + margin / 100), 2)
            updated_at = now()

        with f = 1 + percentage / 100. SET expressions see the pre-update
        cost, so the new price derives from the unrounded new cost.
        Returns the number of rows updated.
        """
        factor = literal(Decimal(1) + percentage / Decimal(100), Numeric(20, 10))
        # numeric literal: keeps the division exact on integer-affinity storage
        hundred = literal(Decimal(100), Numeric(20, 10))
        new_cost = CostPrice.cost * factor
        stmt = (
            update(CostPrice)
            .where(CostPrice.supplier_id == supplier_id)
            .values(
                cost=func.round(new_cost, 2, type_=Numeric(14, 2)),
                sale_price=func.round(
                    new_cost * (1 + CostPrice.margin_percentage / hundred),
                    2,
                    type_=Numeric(14, 2),
                ),
                updated_at=func.now(),
            )
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return int(result.rowcount or 0)
