from typing import List
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from dependency_injector.wiring import inject, Provide

from retailpos.storage.database.db_connector import get_db
from retailpos.app_containers import ApplicationContainer
from retailpos.core.errors import AppError, InternalError
from retailpos.core.logger import logger

from retailpos.v1_0.schemas import ProductCreate
from retailpos.v1_0.entities import ProductCreatedDTO, ProductSearchDTO
from retailpos.v1_0.services import ProductService

router = APIRouter(prefix="/products", tags=["Products"])

@router.post(
    "",
    response_model=ProductCreatedDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product with its initial cost",
)
@inject
async def create_product(
    request: ProductCreate,
    db: AsyncSession = Depends(get_db),
    service: ProductService = Depends(
        Provide[ApplicationContainer.api_container.product_service]
    ),
) -> ProductCreatedDTO:
    logger.info("[ProductRouter] create payload=%s", request.model_dump())
    try:
        return await service.create_with_initial_cost(request, db)
    except AppError:
        raise
    except Exception as e:
        logger.error("[ProductRouter] create error: %s", e, exc_info=True)
        raise InternalError("Failed to create product.")

@router.get(
    "/search",
    response_model=List[ProductSearchDTO],
    summary="Search products by name or SKU",
)
@inject
async def search_products(
    q: str = Query("", max_length=120, description="Text contained in name or SKU"),
    db: AsyncSession = Depends(get_db),
    service: ProductService = Depends(Provide[ApplicationContainer.api_container.product_service]),
):
    logger.debug(f"[ProductRouter] search q={q!r}")
    try:
        return await service.search(q, db)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"[ProductRouter] search error: {e}", exc_info=True)
        raise InternalError("Failed to search products.")
