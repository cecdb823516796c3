import math
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from numbers import Real
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from retailpos.core.errors import ValidationError
from retailpos.core.logger import logger
from retailpos.utils.tx import unit_of_work
from retailpos.v1_0.entities import RepriceResultDTO
from retailpos.v1_0.repositories import CostPriceRepository
from retailpos.v1_0.schemas.price_schema import MAX_PERCENTAGE_INCREASE

CENT = Decimal("0.01")


def to_money(value: Decimal) -> Decimal:
    """Round half away from zero to cents."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


def to_decimal(value: Any, field: str) -> Decimal:
    """
    Coerce a finite int/float/Decimal to Decimal.

    Floats go through str() so 0.1 becomes Decimal("0.1"), not its binary
    expansion. Booleans, strings and non-finite values are rejected.
    """
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise ValidationError(f"{field} must be a number.")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValidationError(f"{field} must be a finite number.")
    try:
        dec = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"{field} must be a number.")
    if not dec.is_finite():
        raise ValidationError(f"{field} must be a finite number.")
    return dec


def compute_sale_price(cost: Any, margin_percentage: Any) -> Decimal:
    """
    sale_price = round(cost * (1 + margin_percentage / 100), 2)

    Raises:
        ValidationError: cost is negative, or either argument is not a
        finite number.
    """
    cost_dec = to_decimal(cost, "cost")
    margin_dec = to_decimal(margin_percentage, "margin_percentage")
    if cost_dec < 0:
        raise ValidationError("cost must be >= 0.")
    return to_money(cost_dec * (1 + margin_dec / 100))


class PricingService:
    def __init__(self, cost_price_repository: CostPriceRepository) -> None:
        self.cost_price_repository = cost_price_repository

    @staticmethod
    def compute_sale_price(cost: Any, margin_percentage: Any) -> Decimal:
        return compute_sale_price(cost, margin_percentage)

    async def bulk_reprice(
        self,
        supplier_id: int,
        percentage_increase: Any,
        db: AsyncSession,
    ) -> RepriceResultDTO:
        """
        Apply a percentage change to the cost of every product of a supplier
        and recompute each derived sale price, as one UPDATE statement.

        Negative percentages lower prices. Zero is rejected as a caller
        error. A supplier with no cost rows yields updated_count == 0.
        Never retried: re-applying a percentage compounds it.

        Args:
            supplier_id: Supplier whose cost rows are repriced.
            percentage_increase: Percent to apply, e.g. 10 for +10%.
            db: Active async database session.

        Returns:
            RepriceResultDTO with a summary message and the row count.

        Raises:
            ValidationError: percentage is not a finite number, is zero, is
            -100 or lower, or exceeds MAX_PERCENTAGE_INCREASE.
        """
        pct = to_decimal(percentage_increase, "percentage_increase")
        if pct == 0:
            raise ValidationError("percentage_increase must be a valid number other than zero.")
        if pct <= -100:
            raise ValidationError("percentage_increase must be greater than -100.")
        if pct > MAX_PERCENTAGE_INCREASE:
            raise ValidationError(f"percentage_increase must be at most {MAX_PERCENTAGE_INCREASE:g}.")

        logger.info(
            "[PricingService] Bulk reprice supplier_id=%s percentage=%s",
            supplier_id,
            pct,
        )

        async with unit_of_work(db):
            updated = await self.cost_price_repository.reprice_by_supplier(
                supplier_id, pct, db
            )

        logger.info(
            "[PricingService] Bulk reprice done supplier_id=%s updated=%s",
            supplier_id,
            updated,
        )
        return RepriceResultDTO(
            message=f"Prices updated: {updated} products for supplier {supplier_id}.",
            updated_count=updated,
        )
