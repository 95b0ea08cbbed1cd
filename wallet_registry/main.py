import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from wallet_registry import __version__
from wallet_registry.core.config import Settings, get_settings
from wallet_registry.core.container import build_container
from wallet_registry.core.logging_config import setup_logging
from wallet_registry.infrastructure.database.session import dispose_engine, init_db
from wallet_registry.interfaces.http import create_api_router
from wallet_registry.interfaces.http.routers import health as health_router
from wallet_registry.modules.wallet_owners.validation import INVALID_PAYLOAD_MESSAGE

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    container = app.state.container
    settings: Settings = container.settings
    container.init_infrastructure()
    if settings.uses_database:
        await init_db()
    logger.info("Wallet owner registry started with %s backend", settings.storage_backend)
    yield
    if settings.uses_database:
        await dispose_engine()


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": INVALID_PAYLOAD_MESSAGE},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.logging.level, settings.logging.file)

    app = FastAPI(
        title=settings.project_name,
        description="سجل مالكي المحافظ",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = build_container(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(create_api_router(settings.api_prefix))
    app.include_router(health_router.router)

    return app


app = create_app()


def run() -> None:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "wallet_registry.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    run()
