from .base_repository import BaseRepository
from .category_repository import CategoryRepository
from .cost_price_repository import CostPriceRepository
from .product_repository import ProductRepository, SaleProductRow
from .sale_detail_repository import SaleDetailRepository
from .sale_repository import SaleRepository
from .supplier_repository import SupplierRepository
__all__ = [
    "BaseRepository",
    "CategoryRepository",
    "CostPriceRepository",
    "ProductRepository",
    "SaleProductRow",
    "SaleDetailRepository",
    "SaleRepository",
    "SupplierRepository",
]
