"""Tests for the credential store service."""

from uuid import uuid4

import pytest

from postkeeper.errors import ConflictError, NotFoundError, ValidationError


@pytest.fixture
def user_service(core):
    return core.services.user


class TestRegister:
    async def test_register_returns_id_of_stored_user(self, user_service, store):
        user_id = await user_service.register("Alice", "a@x.com", "$2b$04$hash")

        user = await user_service.get_user(user_id)
        assert user.name == "Alice"
        assert user.email == "a@x.com"
        assert user.password_hash == "$2b$04$hash"
        assert user.posts == []
        assert user_id in store.documents

    async def test_duplicate_email_rejected(self, user_service):
        await user_service.register("Alice", "a@x.com", "$2b$04$hash")
        with pytest.raises(ConflictError, match="already registered"):
            await user_service.register("Someone Else", "a@x.com", "$2b$04$other")

    async def test_email_is_case_sensitive(self, user_service):
        await user_service.register("Alice", "a@x.com", "$2b$04$hash")
        other_id = await user_service.register("Alice", "A@x.com", "$2b$04$hash")

        user = await user_service.find_by_email("A@x.com")
        assert user.id == other_id

    async def test_missing_fields_rejected(self, user_service, store):
        with pytest.raises(ValidationError):
            await user_service.register("", "a@x.com", "$2b$04$hash")
        assert store.documents == {}


class TestLookup:
    async def test_find_by_email(self, user_service):
        user_id = await user_service.register("Alice", "a@x.com", "$2b$04$hash")
        assert (await user_service.find_by_email("a@x.com")).id == user_id

    async def test_find_by_unknown_email(self, user_service):
        with pytest.raises(NotFoundError, match="User not found"):
            await user_service.find_by_email("nobody@x.com")

    async def test_get_unknown_user(self, user_service):
        with pytest.raises(NotFoundError, match="User not found"):
            await user_service.get_user(uuid4())


class TestSave:
    async def test_save_persists_changes(self, user_service):
        user_id = await user_service.register("Alice", "a@x.com", "$2b$04$hash")
        user = await user_service.get_user(user_id)
        user.name = "Alice B."

        await user_service.save(user)

        assert (await user_service.get_user(user_id)).name == "Alice B."

    async def test_unsaved_changes_are_not_visible(self, user_service):
        user_id = await user_service.register("Alice", "a@x.com", "$2b$04$hash")
        user = await user_service.get_user(user_id)
        user.name = "Changed"

        assert (await user_service.get_user(user_id)).name == "Alice"
