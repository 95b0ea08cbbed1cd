"""Tests for WalletOwnerService use cases over the in-memory backend."""

import pytest

from wallet_registry.modules.wallet_owners import (
    DuplicateIdCardError,
    DuplicateWalletNumberError,
    MemoryWalletOwnerRepository,
    WalletOwnerNotFoundError,
    WalletOwnerService,
    WalletOwnerValidationError,
)


@pytest.fixture
def service():
    return WalletOwnerService.in_memory()


ALI = {"name": "Ali", "idCard": "100", "walletNumber": "W1"}
SARA = {"name": "Sara", "idCard": "200", "walletNumber": "W2", "phone": "0912"}


class TestCreateOwner:
    @pytest.mark.asyncio
    async def test_create_and_fetch(self, service):
        owner = await service.create_owner(ALI)

        assert await service.get_owner(owner.id) == owner
        assert owner.phone is None

    @pytest.mark.asyncio
    async def test_duplicate_id_card_rejected_with_different_wallet(self, service):
        await service.create_owner(ALI)

        with pytest.raises(DuplicateIdCardError) as exc_info:
            await service.create_owner({"name": "Sara", "idCard": "100", "walletNumber": "W2"})

        assert exc_info.value.message == "رقم البطاقة مسجل مسبقاً"
        assert await service.repository.count() == 1

    @pytest.mark.asyncio
    async def test_duplicate_wallet_number_rejected(self, service):
        await service.create_owner(ALI)

        with pytest.raises(DuplicateWalletNumberError) as exc_info:
            await service.create_owner({"name": "Sara", "idCard": "200", "walletNumber": "W1"})

        assert exc_info.value.message == "رقم المحفظة مسجل مسبقاً"
        assert await service.repository.count() == 1

    @pytest.mark.asyncio
    async def test_id_card_checked_before_wallet_number(self, service):
        await service.create_owner(ALI)

        with pytest.raises(DuplicateIdCardError):
            await service.create_owner({"name": "Ali", "idCard": "100", "walletNumber": "W1"})

    @pytest.mark.asyncio
    async def test_validation_runs_first(self, service):
        with pytest.raises(WalletOwnerValidationError):
            await service.create_owner({"name": "", "idCard": "100", "walletNumber": "W1"})
        assert await service.repository.count() == 0


class TestUpdateOwner:
    @pytest.mark.asyncio
    async def test_update_wallet_to_own_value_succeeds(self, service):
        owner = await service.create_owner(ALI)

        updated = await service.update_owner(owner.id, {"walletNumber": "W1", "name": "Ali H"})

        assert updated.wallet_number == "W1"
        assert updated.name == "Ali H"

    @pytest.mark.asyncio
    async def test_update_wallet_to_other_owners_value_rejected(self, service):
        await service.create_owner(ALI)
        sara = await service.create_owner(SARA)

        with pytest.raises(DuplicateWalletNumberError):
            await service.update_owner(sara.id, {"walletNumber": "W1"})

        assert (await service.get_owner(sara.id)).wallet_number == "W2"

    @pytest.mark.asyncio
    async def test_update_id_card_to_other_owners_value_rejected(self, service):
        await service.create_owner(ALI)
        sara = await service.create_owner(SARA)

        with pytest.raises(DuplicateIdCardError):
            await service.update_owner(sara.id, {"idCard": "100"})

    @pytest.mark.asyncio
    async def test_empty_update_returns_record_unchanged(self, service):
        owner = await service.create_owner(SARA)

        assert await service.update_owner(owner.id, {}) == owner
        assert await service.get_owner(owner.id) == owner

    @pytest.mark.asyncio
    async def test_update_missing_owner(self, service):
        with pytest.raises(WalletOwnerNotFoundError):
            await service.update_owner("missing", {"name": "X"})

    @pytest.mark.asyncio
    async def test_invalid_update_rejected_before_lookup(self, service):
        with pytest.raises(WalletOwnerValidationError):
            await service.update_owner("missing", {"name": ""})


class TestReadAndDelete:
    @pytest.mark.asyncio
    async def test_get_missing_owner(self, service):
        with pytest.raises(WalletOwnerNotFoundError) as exc_info:
            await service.get_owner("missing")

        assert exc_info.value.owner_id == "missing"
        assert exc_info.value.message == "المالك غير موجود"

    @pytest.mark.asyncio
    async def test_list_and_search(self, service):
        ali = await service.create_owner(ALI)
        sara = await service.create_owner(SARA)

        assert [owner.id for owner in await service.list_owners()] == [sara.id, ali.id]
        assert [owner.id for owner in await service.search_owners("ali")] == [ali.id]

    @pytest.mark.asyncio
    async def test_delete_owner(self, service):
        owner = await service.create_owner(ALI)

        await service.delete_owner(owner.id)

        with pytest.raises(WalletOwnerNotFoundError):
            await service.get_owner(owner.id)

    @pytest.mark.asyncio
    async def test_delete_missing_owner(self, service):
        await service.create_owner(ALI)

        with pytest.raises(WalletOwnerNotFoundError):
            await service.delete_owner("missing")
        assert await service.repository.count() == 1


class TestConstruction:
    @pytest.mark.asyncio
    async def test_in_memory_uses_given_repository(self):
        repository = MemoryWalletOwnerRepository()
        service = WalletOwnerService.in_memory(repository)

        owner = await service.create_owner(ALI)

        assert service.repository is repository
        assert await repository.get_by_id(owner.id) == owner

    def test_in_memory_without_repository_starts_empty(self):
        service = WalletOwnerService.in_memory()

        assert isinstance(service.repository, MemoryWalletOwnerRepository)
