from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from dependency_injector.wiring import inject, Provide

from retailpos.storage.database.db_connector import get_db
from retailpos.app_containers import ApplicationContainer
from retailpos.core.errors import AppError, InternalError
from retailpos.core.logger import logger

from retailpos.v1_0.schemas import SaleCreate
from retailpos.v1_0.entities import SaleReceiptDTO, SaleDetailDTO
from retailpos.v1_0.services import SaleService

router = APIRouter(prefix="/sales", tags=["Sales"])


@router.post(
    "",
    response_model=SaleReceiptDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Check out a cart",
)
@inject
async def submit_sale(
    request: SaleCreate,
    db: AsyncSession = Depends(get_db),
    service: SaleService = Depends(
        Provide[ApplicationContainer.api_container.sale_service]
    ),
) -> SaleReceiptDTO:
    logger.info(
        "[SaleRouter] submit_sale items=%s",
        [it.model_dump() for it in request.items],
    )
    try:
        return await service.submit_sale(request.items, db)
    except AppError:
        raise
    except Exception as e:
        logger.error(
            "[SaleRouter] submit_sale error: %s",
            e,
            exc_info=True,
        )
        raise InternalError("Failed to register sale.")


@router.get(
    "/{sale_id}",
    response_model=SaleDetailDTO,
    summary="Get a sale with its line items",
)
@inject
async def get_sale(
    sale_id: int,
    db: AsyncSession = Depends(get_db),
    service: SaleService = Depends(Provide[ApplicationContainer.api_container.sale_service]),
):
    logger.debug(f"[SaleRouter] get id={sale_id}")
    try:
        return await service.get_sale_detail(sale_id, db)
    except AppError:
        raise
    except Exception as e:
        logger.error(f"[SaleRouter] get error: {e}", exc_info=True)
        raise InternalError("Failed to fetch sale.")
