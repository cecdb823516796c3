from datetime import datetime
from decimal import Decimal
from sqlalchemy import Numeric, DateTime, ForeignKey, CheckConstraint, func, text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .base import Base

class CostPrice(Base):
    """
    Cost, margin and derived sale price of a product.

    On insert sale_price = round(cost * (1 + margin_percentage / 100), 2).
    A supplier repricing rewrites cost and sale_price in one statement and
    derives the price from the unrounded new cost, so it can sit a cent away
    from a recomputation on the stored cost.
    """
    __tablename__ = "cost_price"
    __table_args__ = (
        CheckConstraint("cost >= 0", name="cost_non_negative"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        ForeignKey("product.id", ondelete="CASCADE"), nullable=False, unique=True
    )
    supplier_id: Mapped[int] = mapped_column(
        ForeignKey("supplier.id", ondelete="RESTRICT"), nullable=False, index=True
    )
    cost: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False, server_default=text("0.00"))
    margin_percentage: Mapped[Decimal] = mapped_column(Numeric(7, 2), nullable=False, server_default=text("0.00"))
    sale_price: Mapped[Decimal] = mapped_column(Numeric(14, 2), nullable=False, server_default=text("0.00"))
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    product = relationship("Product", back_populates="cost_price")
    supplier = relationship("Supplier")
