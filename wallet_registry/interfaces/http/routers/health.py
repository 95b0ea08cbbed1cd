"""Service health endpoint."""

from fastapi import APIRouter, Depends

from wallet_registry import __version__
from wallet_registry.core.container import ApplicationContainer
from wallet_registry.interfaces.http.deps import get_container
from wallet_registry.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse, summary="健康检查")
async def health(container: ApplicationContainer = Depends(get_container)):
    return HealthResponse(backend=container.settings.storage_backend, version=__version__)
