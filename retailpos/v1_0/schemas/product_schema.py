from typing import Optional
from decimal import Decimal
from pydantic import BaseModel, Field

from .sale_schema import MAX_INT

# NUMERIC(14,2) and NUMERIC(7,2) column limits
MAX_COST = Decimal("999999999999.99")
MAX_MARGIN = Decimal("99999.99")

class ProductCreate(BaseModel):
    """Product plus its initial cost row; both are created in one unit of work."""
    name: str = Field(..., min_length=1, max_length=255)
    sku: Optional[str] = Field(None, max_length=120)
    stock_on_hand: int = Field(0, ge=0, le=MAX_INT, description="Initial stock quantity")
    stock_minimum: int = Field(0, ge=0, le=MAX_INT)
    category_id: Optional[int] = Field(None, ge=1, le=MAX_INT)
    unit_of_measure: str = Field(..., min_length=1, max_length=30)
    supplier_id: int = Field(..., ge=1, le=MAX_INT)
    cost: Decimal = Field(..., ge=0, le=MAX_COST, description="Unit cost")
    margin_percentage: Decimal = Field(..., ge=-100, le=MAX_MARGIN, description="Markup over cost, in percent")
    model_config = {
        "str_strip_whitespace": True,
        "json_schema_extra": {
            "example": {
                "name": "Yerba mate 1kg",
                "sku": "YM-1000",
                "stock_on_hand": 40,
                "stock_minimum": 5,
                "category_id": 1,
                "unit_of_measure": "unit",
                "supplier_id": 7,
                "cost": 100,
                "margin_percentage": 20,
            }
        },
    }
