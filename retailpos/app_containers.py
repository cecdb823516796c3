from dependency_injector import containers, providers
from retailpos.core.settings import settings as app_settings
from retailpos.storage.database import build_database
from retailpos.v1_0.v1_containers import APIContainer

class ApplicationContainer(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(
        modules=[
                "retailpos.v1_0.routers.sale_router",
                "retailpos.v1_0.routers.price_router",
                "retailpos.v1_0.routers.supplier_router",
                "retailpos.v1_0.routers.category_router",
                "retailpos.v1_0.routers.product_router",
                "retailpos.v1_0.routers.health_router",
            ]
    )
    settings = providers.Object(app_settings)
    database = providers.Singleton(build_database, settings=settings)

    api_container = providers.Container(
        APIContainer,
        settings=settings,
        database=database,
    )
