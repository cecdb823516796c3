from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from dependency_injector.wiring import inject, Provide

from retailpos.storage.database.db_connector import get_db
from retailpos.app_containers import ApplicationContainer
from retailpos.core.errors import AppError, InternalError
from retailpos.core.logger import logger

from retailpos.v1_0.schemas import SupplierRepriceRequest
from retailpos.v1_0.entities import RepriceResultDTO
from retailpos.v1_0.services import PricingService

router = APIRouter(prefix="/prices", tags=["Prices"])


@router.put(
    "/update-by-supplier",
    response_model=RepriceResultDTO,
    status_code=status.HTTP_200_OK,
    summary="Apply a percentage change to every cost of a supplier",
)
@inject
async def update_by_supplier(
    request: SupplierRepriceRequest,
    db: AsyncSession = Depends(get_db),
    service: PricingService = Depends(
        Provide[ApplicationContainer.api_container.pricing_service]
    ),
) -> RepriceResultDTO:
    logger.info(
        "[PriceRouter] update_by_supplier supplier_id=%s percentage=%s",
        request.supplier_id,
        request.percentage_increase,
    )
    try:
        return await service.bulk_reprice(
            supplier_id=request.supplier_id,
            percentage_increase=request.percentage_increase,
            db=db,
        )
    except AppError:
        raise
    except Exception as e:
        logger.error(
            "[PriceRouter] update_by_supplier error: %s",
            e,
            exc_info=True,
        )
        raise InternalError("Failed to update prices.")
