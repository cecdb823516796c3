from .category_router import router as category_router
from .health_router import router as health_router
from .price_router import router as price_router
from .product_router import router as product_router
from .sale_router import router as sale_router
from .supplier_router import router as supplier_router
defined_routers = [
    sale_router,
    price_router,
    supplier_router,
    category_router,
    product_router,
    health_router,
    ]
