from .category_service import CategoryService
from .health_service import HealthService, DatabaseUnavailable
from .pricing_service import PricingService, compute_sale_price
from .product_service import ProductService
from .sale_service import SaleService
from .supplier_service import SupplierService
__all__ = [
    "CategoryService",
    "HealthService",
    "DatabaseUnavailable",
    "PricingService",
    "compute_sale_price",
    "ProductService",
    "SaleService",
    "SupplierService",
]
