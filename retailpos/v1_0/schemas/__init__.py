from .supplier_schema import SupplierCreate
from .product_schema import ProductCreate
from .price_schema import SupplierRepriceRequest
from .sale_schema import (
    SaleItemInput,
    SaleCreate,
    SaleDetailCreate,
    SaleInsert
    )
__all__ = [
    "SupplierCreate",
    "ProductCreate",
    "SupplierRepriceRequest",
    "SaleItemInput", "SaleCreate", "SaleDetailCreate", "SaleInsert",
]
