from decimal import Decimal
from typing import Dict, List, NamedTuple, Sequence, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from retailpos.core.errors import NotFoundError, StockError, ValidationError
from retailpos.core.logger import logger
from retailpos.utils.tx import unit_of_work
from retailpos.v1_0.entities import (
    SaleDTO,
    SaleReceiptDTO,
    SaleDetailDTO,
    SaleDetailLineDTO,
)
from retailpos.v1_0.repositories import (
    SaleRepository,
    SaleDetailRepository,
    ProductRepository,
)
from retailpos.v1_0.schemas import (
    SaleItemInput,
    SaleDetailCreate,
    SaleInsert,
)
from .pricing_service import to_money


class PricedLine(NamedTuple):
    """A validated line item with the unit price observed while validating."""
    product_id: int
    quantity: int
    unit_price: Decimal


class SaleService:
    def __init__(
        self,
        sale_repository: SaleRepository,
        sale_detail_repository: SaleDetailRepository,
        product_repository: ProductRepository,
    ) -> None:
        self.sale_repository = sale_repository
        self.sale_detail_repository = sale_detail_repository
        self.product_repository = product_repository

    async def _validate_items(
        self,
        items: Sequence[SaleItemInput],
        db: AsyncSession,
    ) -> Tuple[List[PricedLine], Dict[int, int], Decimal, List[str]]:
        """
        Check every line item against locked product rows, in input order.

        A line referencing the same product as an earlier line is checked
        against the stock left after the earlier lines. Problems are
        collected, not raised, so the caller sees all of them at once.

        Args:
            items: Requested line items.
            db: Session with an open transaction.

        Returns:
            Tuple of (priced lines, staged decrement per product, running
            total, per-item error messages).
        """
        products = await self.product_repository.lock_for_sale(
            (it.product_id for it in items), db
        )

        lines: List[PricedLine] = []
        staged: Dict[int, int] = {}
        errors: List[str] = []
        total = Decimal("0")

        for it in items:
            product = products.get(it.product_id)
            if product is None:
                errors.append(f"Product ID {it.product_id} not found.")
                continue

            available = product.stock_on_hand - staged.get(it.product_id, 0)
            if it.quantity > available:
                errors.append(
                    f"Insufficient stock for {product.name}. "
                    f"Current stock: {available}, requested: {it.quantity}"
                )
                continue

            staged[it.product_id] = staged.get(it.product_id, 0) + it.quantity
            total += product.sale_price * it.quantity
            lines.append(PricedLine(it.product_id, it.quantity, product.sale_price))

        return lines, staged, total, errors

    async def submit_sale(
        self,
        items: Sequence[SaleItemInput],
        db: AsyncSession,
    ) -> SaleReceiptDTO:
        """
        Check out a cart as one all-or-nothing unit of work.

        Steps, all inside a single transaction:
        - Lock the referenced product rows and read stock + current price.
        - Validate every line; collect per-item errors.
        - If any line failed, roll back and raise StockError with all messages.
        - Apply conditional stock decrements.
        - Insert the Sale (total rounded to cents) and one SaleDetail per line
          with the price read during validation.
        - Commit.

        No retry is attempted on failure; resubmission is the caller's call.

        Args:
            items: Ordered line items (product_id, quantity).
            db: Active async database session.

        Returns:
            SaleReceiptDTO with the new sale and the number of lines sold.

        Raises:
            ValidationError: If the cart is empty.
            StockError: If any product is missing or short on stock.
        """
        if not items:
            raise ValidationError("A sale must contain at least one item.")

        logger.info("[SaleService] Submitting sale with %s item(s)", len(items))

        async with unit_of_work(db):
            lines, staged, total, errors = await self._validate_items(items, db)
            if errors:
                logger.warning("[SaleService] Sale rejected: %s", errors)
                raise StockError(
                    "Stock error in sale. Transaction reverted.",
                    details=errors,
                )

            for product_id, quantity in staged.items():
                ok = await self.product_repository.decrease_stock(product_id, quantity, db)
                if not ok:
                    # backstop for a store that did not honour the row lock
                    logger.warning(
                        "[SaleService] Conditional decrement failed product_id=%s qty=%s",
                        product_id,
                        quantity,
                    )
                    raise StockError(
                        "Stock error in sale. Transaction reverted.",
                        details=[f"Insufficient stock for product ID {product_id}, requested: {quantity}"],
                    )

            sale = await self.sale_repository.create_sale(
                SaleInsert(total=to_money(total)),
                db,
            )
            await self.sale_detail_repository.bulk_insert_details(
                [
                    SaleDetailCreate(
                        sale_id=sale.id,
                        product_id=ln.product_id,
                        quantity=ln.quantity,
                        unit_price=ln.unit_price,
                    )
                    for ln in lines
                ],
                db,
            )
            dto = SaleReceiptDTO(
                message="Sale registered. Stock updated.",
                sale=SaleDTO(id=sale.id, date=sale.created_at, total=float(sale.total)),
                items_sold=len(lines),
            )

        logger.info(
            "[SaleService] Sale committed id=%s total=%s items=%s",
            dto.sale.id,
            dto.sale.total,
            dto.items_sold,
        )
        return dto

    async def get_sale_detail(self, sale_id: int, db: AsyncSession) -> SaleDetailDTO:
        """
        Retrieve a sale with its line items.

        Quantities and unit prices are the values persisted at checkout;
        product name and SKU are read from the product as it is now.

        Raises:
            NotFoundError: If the sale does not exist.
        """
        logger.debug(f"[SaleService] Get sale detail ID={sale_id}")
        async with db.begin():
            sale = await self.sale_repository.get_by_id(sale_id, db)
            if not sale:
                raise NotFoundError("Sale not found.")
            rows = await self.sale_detail_repository.list_receipt_lines(sale_id, db)

        return SaleDetailDTO(
            sale=SaleDTO(id=sale.id, date=sale.created_at, total=float(sale.total)),
            detail=[
                SaleDetailLineDTO(
                    quantity=int(r["quantity"]),
                    unit_price=float(r["unit_price"]),
                    product_name=r["product_name"],
                    sku=r["sku"],
                )
                for r in rows
            ],
        )
