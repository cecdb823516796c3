from typing import Optional
from pydantic import BaseModel, Field

class SupplierCreate(BaseModel):
    """Input schema to create a supplier."""
    trade_name: str = Field(..., min_length=1, max_length=120)
    tax_id: Optional[str] = Field(None, max_length=50)
    phone: Optional[str] = Field(None, max_length=30)
    model_config = {
        "str_strip_whitespace": True,
        "json_schema_extra": {
            "example": {
                "trade_name": "Distribuidora Norte",
                "tax_id": "30-71234567-9",
                "phone": "+5491144445555",
            }
        },
    }
