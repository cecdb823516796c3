from typing import List
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from dependency_injector.wiring import inject, Provide

from retailpos.storage.database.db_connector import get_db
from retailpos.app_containers import ApplicationContainer
from retailpos.core.errors import AppError, InternalError
from retailpos.core.logger import logger

from retailpos.v1_0.schemas import SupplierCreate
from retailpos.v1_0.entities import SupplierDTO, SupplierCreatedDTO
from retailpos.v1_0.services import SupplierService

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])

@router.post(
    "",
    response_model=SupplierCreatedDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new supplier",
)
@inject
async def create_supplier(
    request: SupplierCreate,
    db: AsyncSession = Depends(get_db),
    service: SupplierService = Depends(
        Provide[ApplicationContainer.api_container.supplier_service]
    ),
) -> SupplierCreatedDTO:
    logger.info(
        "[SupplierRouter] create payload=%s",
        request.model_dump(),
    )
    try:
        return await service.create(payload=request, db=db)
    except AppError:
        raise
    except Exception as e:
        logger.error(
            "[SupplierRouter] create error: %s",
            e,
            exc_info=True,
        )
        raise InternalError("Failed to create supplier.")

@router.get(
    "",
    response_model=List[SupplierDTO],
    summary="List all suppliers",
)
@inject
async def list_suppliers(
    db: AsyncSession = Depends(get_db),
    service: SupplierService = Depends(Provide[ApplicationContainer.api_container.supplier_service]),
):
    logger.debug("[SupplierRouter] list_all")
    try:
        return await service.list_all(db)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"[SupplierRouter] list_all error: {e}", exc_info=True)
        raise InternalError("Failed to list suppliers.")
