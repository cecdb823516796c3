from .category_DTO import CategoryDTO
from .price_DTO import RepriceResultDTO
from .product_DTO import ProductLiteDTO, ProductCreatedDTO, ProductSearchDTO
from .sale_DTO import SaleDTO, SaleReceiptDTO, SaleDetailLineDTO, SaleDetailDTO
from .supplier_DTO import SupplierDTO, SupplierCreatedDTO


__all__ = [
    "CategoryDTO",
    "RepriceResultDTO",
    "ProductLiteDTO", "ProductCreatedDTO", "ProductSearchDTO",
    "SaleDTO", "SaleReceiptDTO", "SaleDetailLineDTO", "SaleDetailDTO",
    "SupplierDTO", "SupplierCreatedDTO",
]
