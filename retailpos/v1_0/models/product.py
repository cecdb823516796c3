from sqlalchemy import String, Integer, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from .base import Base

class Product(Base):
    __tablename__ = "product"
    __table_args__ = (
        CheckConstraint("stock_on_hand >= 0", name="stock_on_hand_non_negative"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    sku: Mapped[str | None] = mapped_column(String(120), nullable=True, index=True)
    stock_on_hand: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    stock_minimum: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    category_id: Mapped[int | None] = mapped_column(
        ForeignKey("category.id", ondelete="RESTRICT"), nullable=True, index=True
    )
    unit_of_measure: Mapped[str] = mapped_column(String(30), nullable=False)

    category = relationship("Category")
    cost_price = relationship("CostPrice", back_populates="product", uselist=False)
