from .base import Base
from .category import Category
from .supplier import Supplier
from .product import Product
from .cost_price import CostPrice
from .sale import Sale
from .sale_detail import SaleDetail
__all__ = [
    "Base",
    "Category",
    "Supplier",
    "Product",
    "CostPrice",
    "Sale",
    "SaleDetail",
]
