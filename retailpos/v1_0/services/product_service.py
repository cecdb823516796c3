from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from retailpos.core.errors import NotFoundError
from retailpos.core.logger import logger
from retailpos.utils.tx import unit_of_work
from retailpos.v1_0.repositories import (
    ProductRepository,
    CostPriceRepository,
    SupplierRepository,
    CategoryRepository,
)
from retailpos.v1_0.schemas import ProductCreate
from retailpos.v1_0.entities import ProductLiteDTO, ProductCreatedDTO, ProductSearchDTO
from .pricing_service import compute_sale_price

class ProductService:
    def __init__(
        self,
        product_repository: ProductRepository,
        cost_price_repository: CostPriceRepository,
        supplier_repository: SupplierRepository,
        category_repository: CategoryRepository,
        search_limit: int = 50,
    ) -> None:
        self.product_repository = product_repository
        self.cost_price_repository = cost_price_repository
        self.supplier_repository = supplier_repository
        self.category_repository = category_repository
        self.search_limit = search_limit

    async def create_with_initial_cost(
        self,
        payload: ProductCreate,
        db: AsyncSession,
    ) -> ProductCreatedDTO:
        """
        Create a product together with its cost row.

        Operations:
        - Check the supplier (and the category, when given) exist.
        - Compute the sale price from cost and margin.
        - Insert the product, then its cost row, in one unit of work.

        Args:
            payload: ProductCreate with product fields, cost and margin.
            db: Active async database session.

        Returns:
            ProductCreatedDTO with the new product and its sale price.

        Raises:
            NotFoundError: unknown supplier or category.
            ValidationError: cost or margin rejected by the pricing rule.
        """
        logger.info("[ProductService] Creating product: %s", payload.model_dump())
        sale_price = compute_sale_price(payload.cost, payload.margin_percentage)

        async with unit_of_work(db):
            supplier = await self.supplier_repository.get_supplier_by_id(payload.supplier_id, db)
            if not supplier:
                raise NotFoundError("Supplier not found.")
            if payload.category_id is not None:
                category = await self.category_repository.get_category_by_id(payload.category_id, db)
                if not category:
                    raise NotFoundError("Category not found.")

            p = await self.product_repository.create_product(payload, db)
            await self.cost_price_repository.create_cost_price(
                product_id=p.id,
                supplier_id=payload.supplier_id,
                cost=payload.cost,
                margin_percentage=payload.margin_percentage,
                sale_price=sale_price,
                session=db,
            )
            dto = ProductCreatedDTO(
                message="Product created with initial cost.",
                product=ProductLiteDTO(id=p.id, name=p.name),
                sale_price=float(sale_price),
            )

        logger.info("[ProductService] Product created ID=%s sale_price=%s", dto.product.id, sale_price)
        return dto

    async def search(self, q: str, db: AsyncSession) -> List[ProductSearchDTO]:
        logger.debug(f"[ProductService] search q={q!r}")
        async with db.begin():
            rows = await self.product_repository.search(q, db, limit=self.search_limit)
        return [
            ProductSearchDTO(
                id=r["id"],
                name=r["name"],
                sku=r["sku"],
                stock_on_hand=int(r["stock_on_hand"] or 0),
                unit_of_measure=r["unit_of_measure"],
                sale_price=float(r["sale_price"]),
            )
            for r in rows
        ]
