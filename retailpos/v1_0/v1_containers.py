from dependency_injector import containers, providers
from retailpos.core.settings import Settings
from retailpos.storage.database import Database
from retailpos.v1_0.repositories import (
    SupplierRepository,
    CategoryRepository,
    ProductRepository,
    CostPriceRepository,
    SaleRepository,
    SaleDetailRepository,
    )
from retailpos.v1_0.services import (
    SupplierService,
    CategoryService,
    ProductService,
    PricingService,
    SaleService,
    HealthService,
    )

class APIContainer(containers.DeclarativeContainer):
    settings = providers.Dependency(instance_of=Settings)
    database = providers.Dependency(instance_of=Database)

    supplier_repository = providers.Singleton(SupplierRepository)
    category_repository = providers.Singleton(CategoryRepository)
    product_repository = providers.Singleton(ProductRepository)
    cost_price_repository = providers.Singleton(CostPriceRepository)
    sale_repository = providers.Singleton(SaleRepository)
    sale_detail_repository = providers.Singleton(SaleDetailRepository)

    supplier_service = providers.Singleton(
        SupplierService,
        supplier_repository=supplier_repository,
    )
    category_service = providers.Singleton(
        CategoryService,
        category_repository=category_repository,
    )
    product_service = providers.Singleton(
        ProductService,
        product_repository=product_repository,
        cost_price_repository=cost_price_repository,
        supplier_repository=supplier_repository,
        category_repository=category_repository,
        search_limit=settings.provided.SEARCH_LIMIT,
    )
    pricing_service = providers.Singleton(
        PricingService,
        cost_price_repository=cost_price_repository,
    )
    sale_service = providers.Singleton(
        SaleService,
        sale_repository=sale_repository,
        sale_detail_repository=sale_detail_repository,
        product_repository=product_repository,
    )
    health_service = providers.Factory(
        HealthService,
        database=database,
    )
