from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from dependency_injector.wiring import inject, Provide

from retailpos.app_containers import ApplicationContainer
from retailpos.core.logger import logger

from retailpos.v1_0.services import HealthService, DatabaseUnavailable

router = APIRouter(prefix="/health", tags=["health"])

@router.get("/db", summary="Round trip to the database")
@inject
async def health_db(
    service: HealthService = Depends(
        Provide[ApplicationContainer.api_container.health_service]
    ),
):
    logger.debug("[HealthRouter] health_db")
    try:
        return await service.check_database()
    except DatabaseUnavailable:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"error": "Database unreachable."},
        )
