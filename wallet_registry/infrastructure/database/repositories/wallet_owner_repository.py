"""SQLAlchemy implementation of the wallet owner repository."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from wallet_registry.core.clock import ensure_utc, utcnow_monotonic
from wallet_registry.db.models import WalletOwner as WalletOwnerModel, generate_uuid
from wallet_registry.modules.wallet_owners.exceptions import (
    DuplicateIdCardError,
    DuplicateWalletNumberError,
)
from wallet_registry.modules.wallet_owners.models import (
    WalletOwner,
    WalletOwnerCreateInput,
    WalletOwnerUpdateInput,
)
from wallet_registry.modules.wallet_owners.repository import WalletOwnerRepository

LIKE_ESCAPE = "\\"


def like_pattern(query: str) -> str:
    """Build a substring LIKE pattern that treats ``%`` and ``_`` literally."""
    escaped = (
        query.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


class SqlWalletOwnerRepository(WalletOwnerRepository):
    """Wallet owner repository backed by SQLAlchemy models.

    Each mutation is committed immediately. Unique constraint violations
    raised by the database are translated into the domain duplicate errors.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @property
    def session(self) -> AsyncSession:
        return self._session

    async def list_all(self) -> Sequence[WalletOwner]:
        stmt = select(WalletOwnerModel).order_by(*self._newest_first())
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def get_by_id(self, owner_id: str) -> WalletOwner | None:
        model = await self._get_model(owner_id)
        return self._to_domain(model) if model is not None else None

    async def get_by_id_card(self, id_card: str) -> WalletOwner | None:
        stmt = select(WalletOwnerModel).where(WalletOwnerModel.id_card == id_card)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def get_by_wallet_number(self, wallet_number: str) -> WalletOwner | None:
        stmt = select(WalletOwnerModel).where(WalletOwnerModel.wallet_number == wallet_number)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model is not None else None

    async def create(self, payload: WalletOwnerCreateInput) -> WalletOwner:
        model = WalletOwnerModel(
            id=generate_uuid(),
            name=payload.name,
            id_card=payload.id_card,
            wallet_number=payload.wallet_number,
            phone=payload.phone,
            created_at=utcnow_monotonic(),
        )
        self._session.add(model)
        await self._commit(payload.id_card, payload.wallet_number)
        await self._session.refresh(model)
        return self._to_domain(model)

    async def update(self, owner_id: str, payload: WalletOwnerUpdateInput) -> WalletOwner | None:
        model = await self._get_model(owner_id)
        if model is None:
            return None

        changes = payload.changes()
        for field, value in changes.items():
            setattr(model, field, value)

        await self._commit(changes.get("id_card"), changes.get("wallet_number"), owner_id=owner_id)
        await self._session.refresh(model)
        return self._to_domain(model)

    async def delete(self, owner_id: str) -> bool:
        stmt = delete(WalletOwnerModel).where(WalletOwnerModel.id == owner_id)
        result = await self._session.execute(stmt)
        await self._session.commit()
        return (result.rowcount or 0) > 0

    async def search(self, query: str) -> Sequence[WalletOwner]:
        pattern = like_pattern(query)
        stmt = (
            select(WalletOwnerModel)
            .where(
                or_(
                    WalletOwnerModel.name.ilike(pattern, escape=LIKE_ESCAPE),
                    WalletOwnerModel.id_card.ilike(pattern, escape=LIKE_ESCAPE),
                    WalletOwnerModel.wallet_number.ilike(pattern, escape=LIKE_ESCAPE),
                    WalletOwnerModel.phone.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
            .order_by(*self._newest_first())
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def count(self) -> int:
        stmt = select(func.count()).select_from(WalletOwnerModel)
        result = await self._session.execute(stmt)
        return int(result.scalar_one())

    async def _get_model(self, owner_id: str) -> WalletOwnerModel | None:
        stmt = select(WalletOwnerModel).where(WalletOwnerModel.id == owner_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _commit(
        self,
        id_card: object,
        wallet_number: object,
        *,
        owner_id: str | None = None,
    ) -> None:
        try:
            await self._session.flush()
            await self._session.commit()
        except IntegrityError:
            await self._session.rollback()
            if id_card is not None:
                holder = await self.get_by_id_card(str(id_card))
                if holder is not None and holder.id != owner_id:
                    raise DuplicateIdCardError(str(id_card))
            if wallet_number is not None:
                holder = await self.get_by_wallet_number(str(wallet_number))
                if holder is not None and holder.id != owner_id:
                    raise DuplicateWalletNumberError(str(wallet_number))
            raise

    @staticmethod
    def _newest_first():
        return (WalletOwnerModel.created_at.desc(), WalletOwnerModel.id.desc())

    @staticmethod
    def _to_domain(model: WalletOwnerModel) -> WalletOwner:
        return WalletOwner(
            id=str(model.id),
            name=model.name,
            id_card=model.id_card,
            wallet_number=model.wallet_number,
            phone=model.phone,
            created_at=ensure_utc(model.created_at),
        )
