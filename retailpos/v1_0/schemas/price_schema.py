from pydantic import BaseModel, Field

from .sale_schema import MAX_INT

# a repricing may at most multiply costs by 11
MAX_PERCENTAGE_INCREASE = 1000.0

class SupplierRepriceRequest(BaseModel):
    """
    Body for PUT /prices/update-by-supplier. Zero is rejected by the service;
    -100 or lower would zero or negate every cost.
    """
    supplier_id: int = Field(..., ge=1, le=MAX_INT)
    percentage_increase: float = Field(
        ..., gt=-100, le=MAX_PERCENTAGE_INCREASE, allow_inf_nan=False
    )
    model_config = {
        "json_schema_extra": {
            "example": {"supplier_id": 7, "percentage_increase": 10}
        }
    }
