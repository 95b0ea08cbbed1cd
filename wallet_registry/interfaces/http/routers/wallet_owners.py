"""Wallet owner CRUD and search endpoints."""
import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Query, status

from wallet_registry.interfaces.http.deps import get_wallet_owner_service
from wallet_registry.modules.wallet_owners import (
    WalletOwnerDuplicateError,
    WalletOwnerNotFoundError,
    WalletOwnerService,
    WalletOwnerValidationError,
)
from wallet_registry.schemas import MessageResponse, WalletOwnerResponse

logger = logging.getLogger(__name__)

router = APIRouter()

SEARCH_QUERY_REQUIRED = "استعلام البحث مطلوب"
DELETED_MESSAGE = "تم حذف المالك بنجاح"


def _to_schema(owner) -> WalletOwnerResponse:
    return WalletOwnerResponse.model_validate(owner)


@router.get(
    "",
    response_model=List[WalletOwnerResponse],
    response_model_by_alias=True,
    summary="获取全部钱包持有人",
)
async def list_owners(service: WalletOwnerService = Depends(get_wallet_owner_service)):
    try:
        owners = await service.list_owners()
    except Exception as exc:
        logger.exception("Failed to list wallet owners")
        raise HTTPException(status_code=500, detail="خطأ في جلب بيانات المالكين") from exc
    return [_to_schema(owner) for owner in owners]


@router.get(
    "/search",
    response_model=List[WalletOwnerResponse],
    response_model_by_alias=True,
    summary="搜索钱包持有人",
)
async def search_owners(
    q: Optional[str] = Query(default=None),
    service: WalletOwnerService = Depends(get_wallet_owner_service),
):
    if not q:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=SEARCH_QUERY_REQUIRED)
    try:
        owners = await service.search_owners(q)
    except Exception as exc:
        logger.exception("Search for %r failed", q)
        raise HTTPException(status_code=500, detail="خطأ في البحث") from exc
    return [_to_schema(owner) for owner in owners]


@router.get(
    "/{owner_id}",
    response_model=WalletOwnerResponse,
    response_model_by_alias=True,
    summary="获取钱包持有人详情",
)
async def get_owner(owner_id: str, service: WalletOwnerService = Depends(get_wallet_owner_service)):
    try:
        owner = await service.get_owner(owner_id)
    except WalletOwnerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message) from exc
    except Exception as exc:
        logger.exception("Failed to load wallet owner %s", owner_id)
        raise HTTPException(status_code=500, detail="خطأ في جلب بيانات المالك") from exc
    return _to_schema(owner)


@router.post(
    "",
    response_model=WalletOwnerResponse,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
    summary="登记钱包持有人",
)
async def create_owner(
    payload: Any = Body(default=None),
    service: WalletOwnerService = Depends(get_wallet_owner_service),
):
    try:
        owner = await service.create_owner(payload)
    except (WalletOwnerValidationError, WalletOwnerDuplicateError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message) from exc
    except Exception as exc:
        logger.exception("Failed to create wallet owner")
        raise HTTPException(status_code=500, detail="خطأ في إنشاء المالك") from exc
    return _to_schema(owner)


@router.put(
    "/{owner_id}",
    response_model=WalletOwnerResponse,
    response_model_by_alias=True,
    summary="更新钱包持有人",
)
async def update_owner(
    owner_id: str,
    payload: Any = Body(default=None),
    service: WalletOwnerService = Depends(get_wallet_owner_service),
):
    try:
        owner = await service.update_owner(owner_id, payload)
    except WalletOwnerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message) from exc
    except (WalletOwnerValidationError, WalletOwnerDuplicateError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message) from exc
    except Exception as exc:
        logger.exception("Failed to update wallet owner %s", owner_id)
        raise HTTPException(status_code=500, detail="خطأ في تحديث المالك") from exc
    return _to_schema(owner)


@router.delete("/{owner_id}", response_model=MessageResponse, summary="删除钱包持有人")
async def delete_owner(owner_id: str, service: WalletOwnerService = Depends(get_wallet_owner_service)):
    try:
        await service.delete_owner(owner_id)
    except WalletOwnerNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message) from exc
    except Exception as exc:
        logger.exception("Failed to delete wallet owner %s", owner_id)
        raise HTTPException(status_code=500, detail="خطأ في حذف المالك") from exc
    return MessageResponse(message=DELETED_MESSAGE)
