from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from dependency_injector.wiring import inject, Provide

from retailpos.storage.database.db_connector import get_db
from retailpos.app_containers import ApplicationContainer
from retailpos.core.errors import AppError, InternalError
from retailpos.core.logger import logger

from retailpos.v1_0.entities import CategoryDTO
from retailpos.v1_0.services import CategoryService

router = APIRouter(prefix="/categories", tags=["Categories"])

@router.get(
    "",
    response_model=List[CategoryDTO],
    summary="List all categories",
    status_code=status.HTTP_200_OK,
)
@inject
async def list_categories(
    db: AsyncSession = Depends(get_db),
    service: CategoryService = Depends(
        Provide[ApplicationContainer.api_container.category_service]
    ),
):
    logger.debug("[CategoryRouter] list_categories")
    try:
        return await service.list_all(db)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"[CategoryRouter] list_categories error: {e}", exc_info=True)
        raise InternalError("Failed to list categories.")
