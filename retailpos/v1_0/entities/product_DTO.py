from dataclasses import dataclass
from typing import Optional

@dataclass(slots=True)
class ProductLiteDTO:
    """Minimal product reference."""
    id: int
    name: str

@dataclass(slots=True)
class ProductCreatedDTO:
    message: str
    product: ProductLiteDTO
    sale_price: float

@dataclass(slots=True)
class ProductSearchDTO:
    """Row returned to the POS search box, with the current sale price."""
    id: int
    name: str
    sku: Optional[str]
    stock_on_hand: int
    unit_of_measure: str
    sale_price: float
