"""
Storage contract tests.

Every test in ``TestRepositoryContract`` runs against both the in-memory and
the SQL backend through the parametrized ``repository`` fixture.
"""

from datetime import timezone

import pytest

from wallet_registry.infrastructure.database.repositories.wallet_owner_repository import like_pattern
from wallet_registry.modules.wallet_owners import (
    DuplicateIdCardError,
    DuplicateWalletNumberError,
    WalletOwnerCreateInput,
    WalletOwnerUpdateInput,
)


def owner_input(name="Ali", id_card="100", wallet_number="W1", phone=None):
    return WalletOwnerCreateInput(name=name, id_card=id_card, wallet_number=wallet_number, phone=phone)


class TestRepositoryContract:
    """Behaviour shared by both storage backends."""

    @pytest.mark.asyncio
    async def test_create_assigns_id_and_timestamp(self, repository):
        owner = await repository.create(owner_input(phone="0912"))

        assert owner.id
        assert owner.created_at.tzinfo is not None
        assert owner.created_at.utcoffset() == timezone.utc.utcoffset(None)
        assert (owner.name, owner.id_card, owner.wallet_number, owner.phone) == ("Ali", "100", "W1", "0912")

        fetched = await repository.get_by_id(owner.id)
        assert fetched == owner

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, repository):
        assert await repository.get_by_id("missing") is None
        assert await repository.get_by_id_card("nope") is None
        assert await repository.get_by_wallet_number("nope") is None

    @pytest.mark.asyncio
    async def test_lookup_by_unique_fields_is_exact(self, repository):
        owner = await repository.create(owner_input(id_card="ABC", wallet_number="W-9"))

        assert (await repository.get_by_id_card("ABC")).id == owner.id
        assert (await repository.get_by_wallet_number("W-9")).id == owner.id
        assert await repository.get_by_id_card("AB") is None
        assert await repository.get_by_wallet_number("w-9") is None

    @pytest.mark.asyncio
    async def test_list_all_is_newest_first(self, repository):
        first = await repository.create(owner_input("A", "1", "W1"))
        second = await repository.create(owner_input("B", "2", "W2"))
        third = await repository.create(owner_input("C", "3", "W3"))

        owners = await repository.list_all()

        assert [owner.id for owner in owners] == [third.id, second.id, first.id]
        stamps = [owner.created_at for owner in owners]
        assert all(later > earlier for later, earlier in zip(stamps, stamps[1:]))

    @pytest.mark.asyncio
    async def test_list_all_empty(self, repository):
        assert list(await repository.list_all()) == []

    @pytest.mark.asyncio
    async def test_update_merges_provided_fields(self, repository):
        owner = await repository.create(owner_input(phone="0912"))

        updated = await repository.update(owner.id, WalletOwnerUpdateInput(name="Ali Hassan"))

        assert updated.name == "Ali Hassan"
        assert updated.id == owner.id
        assert updated.created_at == owner.created_at
        assert (updated.id_card, updated.wallet_number, updated.phone) == ("100", "W1", "0912")
        assert await repository.get_by_id(owner.id) == updated

    @pytest.mark.asyncio
    async def test_update_can_clear_phone(self, repository):
        owner = await repository.create(owner_input(phone="0912"))

        updated = await repository.update(owner.id, WalletOwnerUpdateInput(phone=None))

        assert updated.phone is None

    @pytest.mark.asyncio
    async def test_empty_update_leaves_record_unchanged(self, repository):
        owner = await repository.create(owner_input(phone="0912"))

        updated = await repository.update(owner.id, WalletOwnerUpdateInput())

        assert updated == owner

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self, repository):
        assert await repository.update("missing", WalletOwnerUpdateInput(name="X")) is None

    @pytest.mark.asyncio
    async def test_delete(self, repository):
        owner = await repository.create(owner_input())
        await repository.create(owner_input("B", "2", "W2"))

        assert await repository.delete(owner.id) is True
        assert await repository.get_by_id(owner.id) is None
        assert await repository.count() == 1

    @pytest.mark.asyncio
    async def test_delete_missing_keeps_cardinality(self, repository):
        await repository.create(owner_input())

        assert await repository.delete("missing") is False
        assert await repository.count() == 1

    @pytest.mark.asyncio
    async def test_store_rejects_duplicate_id_card(self, repository):
        await repository.create(owner_input())

        with pytest.raises(DuplicateIdCardError):
            await repository.create(owner_input("Sara", "100", "W2"))
        assert await repository.count() == 1

    @pytest.mark.asyncio
    async def test_store_rejects_duplicate_wallet_number_on_update(self, repository):
        await repository.create(owner_input("A", "1", "W1"))
        other = await repository.create(owner_input("B", "2", "W2"))

        with pytest.raises(DuplicateWalletNumberError):
            await repository.update(other.id, WalletOwnerUpdateInput(wallet_number="W1"))
        assert (await repository.get_by_id(other.id)).wallet_number == "W2"

    @pytest.mark.asyncio
    async def test_update_with_own_id_card_and_taken_wallet_number(self, repository):
        await repository.create(owner_input("A", "1", "W1"))
        other = await repository.create(owner_input("B", "2", "W2"))

        with pytest.raises(DuplicateWalletNumberError):
            await repository.update(other.id, WalletOwnerUpdateInput(id_card="2", wallet_number="W1"))
        assert (await repository.get_by_id(other.id)).wallet_number == "W2"


class TestRepositorySearch:
    """Substring search semantics shared by both backends."""

    @pytest.fixture
    async def seeded(self, repository):
        ali = await repository.create(owner_input("Ali Ahmed", "100", "W-ONE", "0912345"))
        sara = await repository.create(owner_input("Sara", "200", "W-TWO", None))
        omar = await repository.create(owner_input("omar", "345", "W-THREE", "0777"))
        return repository, ali, sara, omar

    @pytest.mark.asyncio
    async def test_search_name_is_case_insensitive(self, seeded):
        repository, ali, _, _ = seeded

        assert [owner.id for owner in await repository.search("ALI")] == [ali.id]
        assert [owner.id for owner in await repository.search("w-one")] == [ali.id]

    @pytest.mark.asyncio
    async def test_search_matches_each_field(self, seeded):
        repository, ali, sara, omar = seeded

        assert [owner.id for owner in await repository.search("200")] == [sara.id]
        assert [owner.id for owner in await repository.search("THREE")] == [omar.id]
        assert [owner.id for owner in await repository.search("0777")] == [omar.id]

    @pytest.mark.asyncio
    async def test_search_results_are_newest_first(self, seeded):
        repository, ali, sara, omar = seeded

        assert [owner.id for owner in await repository.search("w-")] == [omar.id, sara.id, ali.id]

    @pytest.mark.asyncio
    async def test_null_phone_never_matches_on_phone(self, seeded):
        repository, ali, sara, omar = seeded

        # "345" is in Ali's phone and Omar's id card; Sara has no phone at all.
        found = [owner.id for owner in await repository.search("345")]

        assert sara.id not in found
        assert found == [omar.id, ali.id]

    @pytest.mark.asyncio
    async def test_empty_query_matches_everything(self, seeded):
        repository, ali, sara, omar = seeded

        assert [owner.id for owner in await repository.search("")] == [omar.id, sara.id, ali.id]

    @pytest.mark.asyncio
    async def test_search_folds_non_ascii_case(self, seeded):
        repository, *_ = seeded
        omer = await repository.create(owner_input("ÖMER", "901", "W-901"))

        assert [owner.id for owner in await repository.search("ömer")] == [omer.id]

    @pytest.mark.asyncio
    async def test_wildcards_are_literal(self, seeded):
        repository, *_ = seeded

        assert list(await repository.search("%")) == []
        assert list(await repository.search("_")) == []

        percent = await repository.create(owner_input("50% Club", "900", "W-900"))
        assert [owner.id for owner in await repository.search("50%")] == [percent.id]


class TestSqlRepository:
    """Details specific to the SQLAlchemy backend."""

    def test_like_pattern_escapes_wildcards(self):
        assert like_pattern("ali") == "%ali%"
        assert like_pattern("50%") == "%50\\%%"
        assert like_pattern("a_b") == "%a\\_b%"
        assert like_pattern("a\\b") == "%a\\\\b%"

    @pytest.mark.asyncio
    async def test_session_usable_after_integrity_error(self, sql_repository):
        await sql_repository.create(owner_input())

        with pytest.raises(DuplicateIdCardError):
            await sql_repository.create(owner_input("Sara", "100", "W2"))

        created = await sql_repository.create(owner_input("Sara", "101", "W2"))
        assert await sql_repository.count() == 2
        assert (await sql_repository.list_all())[0].id == created.id
