from dataclasses import dataclass
from decimal import Decimal
from typing import List, Dict, Iterable

from sqlalchemy import select, update, func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from retailpos.v1_0.models import Product, CostPrice
from retailpos.v1_0.schemas import ProductCreate
from .base_repository import BaseRepository


@dataclass(slots=True)
class SaleProductRow:
    """Product state read inside a sale's unit of work."""
    id: int
    name: str
    stock_on_hand: int
    sale_price: Decimal


class ProductRepository(BaseRepository[Product]):
    def __init__(self) -> None:
        super().__init__(Product)

    async def create_product(
        self,
        payload: ProductCreate,
        session: AsyncSession
    ) -> Product:
        entity = Product(
            name=payload.name,
            sku=payload.sku,
            stock_on_hand=payload.stock_on_hand,
            stock_minimum=payload.stock_minimum,
            category_id=payload.category_id,
            unit_of_measure=payload.unit_of_measure,
        )
        await self.add(entity, session)
        return entity

    async def lock_for_sale(
        self,
        product_ids: Iterable[int],
        session: AsyncSession
    ) -> Dict[int, SaleProductRow]:
        """
        Read stock and current sale price for the given products, taking a
        row lock on each product row (FOR UPDATE OF product).

        Rows are locked in ascending id order so two carts sharing products
        always acquire locks in the same sequence. Cost rows are not locked;
        a concurrent repricing does not wait on checkouts.
        Products without a cost row are absent from the result.
        """
        ids = sorted(set(product_ids))
        if not ids:
            return {}

        stmt = (
            select(
                Product.id,
                Product.name,
                Product.stock_on_hand,
                CostPrice.sale_price,
            )
            .join(CostPrice, CostPrice.product_id == Product.id)
            .where(Product.id.in_(ids))
            .order_by(Product.id.asc())
            .with_for_update(of=Product)
        )
        rows = (await session.execute(stmt)).all()
        return {
            r.id: SaleProductRow(
                id=r.id,
                name=r.name,
                stock_on_hand=int(r.stock_on_hand or 0),
                sale_price=Decimal(r.sale_price),
            )
            for r in rows
        }

    async def decrease_stock(
        self,
        product_id: int,
        amount: int,
        session: AsyncSession
    ) -> bool:
        """
        Conditional decrement. Returns False (and changes nothing) when the
        product is missing or its stock is lower than `amount`.
        """
        stmt = (
            update(Product)
            .where(Product.id == product_id, Product.stock_on_hand >= amount)
            .values(stock_on_hand=Product.stock_on_hand - amount)
            .execution_options(synchronize_session=False)
        )
        result = await session.execute(stmt)
        return result.rowcount == 1

    async def search(
        self,
        term: str,
        session: AsyncSession,
        *,
        limit: int = 50,
    ) -> List[dict]:
        """
        Case-insensitive substring match on name or SKU, ordered by name.
        Returns: [{ id, name, sku, stock_on_hand, unit_of_measure, sale_price }, ...]
        """
        needle = (term or "").strip().lower()
        needle = needle.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        pattern = f"%{needle}%"
        stmt = (
            select(
                Product.id,
                Product.name,
                Product.sku,
                Product.stock_on_hand,
                Product.unit_of_measure,
                CostPrice.sale_price,
            )
            .join(CostPrice, CostPrice.product_id == Product.id)
            .where(
                or_(
                    func.lower(Product.name).like(pattern, escape="\\"),
                    func.lower(Product.sku).like(pattern, escape="\\"),
                )
            )
            .order_by(Product.name.asc(), Product.id.asc())
            .limit(limit)
        )
        rows = (await session.execute(stmt)).mappings().all()
        return [dict(r) for r in rows]
