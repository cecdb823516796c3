from typing import List
from decimal import Decimal
from datetime import datetime, timezone
from pydantic import BaseModel, Field

# upper bound of a 32-bit INTEGER column
MAX_INT = 2_147_483_647

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)

class SaleItemInput(BaseModel):
    product_id: int = Field(..., ge=1, le=MAX_INT)
    quantity: int = Field(..., gt=0, le=MAX_INT)

class SaleCreate(BaseModel):
    """Request body for POST /sales. Line items are processed in order."""
    items: List[SaleItemInput] = Field(..., min_length=1)
    model_config = {
        "json_schema_extra": {
            "example": {
                "items": [
                    {"product_id": 1, "quantity": 2},
                    {"product_id": 4, "quantity": 1},
                ]
            }
        }
    }

class SaleDetailCreate(BaseModel):
    sale_id: int = Field(..., ge=1)
    product_id: int = Field(..., ge=1)
    quantity: int = Field(..., gt=0)
    unit_price: Decimal = Field(..., ge=0)

class SaleInsert(BaseModel):
    total: Decimal = Field(..., ge=0)
    created_at: datetime = Field(default_factory=_utcnow)
