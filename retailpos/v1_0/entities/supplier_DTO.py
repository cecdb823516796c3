from dataclasses import dataclass
from typing import Optional

@dataclass(slots=True)
class SupplierDTO:
    """Full row for supplier listing."""
    id: int
    trade_name: str
    tax_id: Optional[str]
    phone: Optional[str]

@dataclass(slots=True)
class SupplierCreatedDTO:
    message: str
    supplier: SupplierDTO
