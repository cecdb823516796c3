from contextlib import asynccontextmanager
from inspect import isawaitable
from typing import cast

from fastapi import FastAPI, APIRouter
from fastapi.middleware.cors import CORSMiddleware

from retailpos.core.settings import settings
from retailpos.core.logger import logger
from retailpos.core.errors import register_exception_handlers
from retailpos.v1_0.v1_router import v1_router
from retailpos.app_containers import ApplicationContainer
API_PREFIX = settings.API_PREFIX


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = cast(ApplicationContainer, app.state.container)
    ret = container.init_resources()
    if isawaitable(ret):
        await ret
    database = container.database()
    if settings.DB_CREATE_SCHEMA:
        await database.create_all()
    logger.info(f"{settings.APP_NAME} starting in {settings.APP_ENV} ({database.dialect})")
    try:
        yield
    finally:
        logger.info(f"{settings.APP_NAME} shutdown")
        shut = container.shutdown_resources()
        if isawaitable(shut):
            await shut
        await database.dispose()


def create_app(container: ApplicationContainer | None = None) -> FastAPI:
    if container is None:
        container = ApplicationContainer()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
        openapi_url=f"{API_PREFIX}/openapi.json",
        docs_url=f"{API_PREFIX}/docs",
        redoc_url=f"{API_PREFIX}/redoc",
        lifespan=lifespan,
    )

    app.state.container = container
    register_exception_handlers(app)

    origins = settings.CORS_ORIGINS_LIST
    allow_credentials = True

    if "*" in origins:
        # wildcard + credentials is not legal CORS
        allow_credentials = False

    logger.info("CORS origins=%s allow_credentials=%s", origins, allow_credentials)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    base_router = APIRouter(prefix=API_PREFIX)
    base_router.include_router(v1_router)

    @base_router.get("/ready", tags=["health"])
    async def ready():
        return {
            "message": "ready",
            "name": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "env": settings.APP_ENV,
            "prefix": API_PREFIX,
        }

    app.include_router(base_router)

    return app


app = create_app()
