from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

@dataclass(slots=True)
class SaleDTO:
    id: int
    date: datetime
    total: float

@dataclass(slots=True)
class SaleReceiptDTO:
    """Response of a committed checkout."""
    message: str
    sale: SaleDTO
    items_sold: int

@dataclass(slots=True)
class SaleDetailLineDTO:
    """
    One receipt line. quantity/unit_price are the persisted values;
    product_name/sku are read from the product as it is today.
    """
    quantity: int
    unit_price: float
    product_name: str
    sku: Optional[str]

@dataclass(slots=True)
class SaleDetailDTO:
    sale: SaleDTO
    detail: List[SaleDetailLineDTO]
