"""Tests for the request gate in front of protected operations."""

from datetime import timedelta
from uuid import uuid4

import pytest

from postkeeper.core.modules.session.service import parse_bearer_token
from postkeeper.core.modules.token import service as token_module
from postkeeper.core.modules.token.service import TokenService
from postkeeper.errors import AccessDeniedError, AuthenticationError
from postkeeper.utils import now


class TestParseBearerToken:
    def test_bearer_header(self):
        assert parse_bearer_token("Bearer abc.def") == "abc.def"

    def test_scheme_is_case_insensitive(self):
        assert parse_bearer_token("bearer abc") == "abc"

    @pytest.mark.parametrize("header", ["Bearer", "Bearer ", "abc", "Basic abc", "Token abc"])
    def test_no_token(self, header):
        assert parse_bearer_token(header) is None


class TestAuthenticate:
    @pytest.fixture(autouse=True)
    def setup(self, core):
        self.core = core
        self.session = core.services.session

    async def test_valid_token_resolves_user(self):
        user_id = uuid4()
        token = self.core.token_service.issue(user_id)
        assert await self.session.authenticate(f"Bearer {token}") == user_id

    @pytest.mark.parametrize("header", [None, ""])
    async def test_missing_header_is_unauthenticated(self, header):
        with pytest.raises(AuthenticationError, match="Unauthorized"):
            await self.session.authenticate(header)

    @pytest.mark.parametrize("header", ["Bearer", "Bearer ", "Basic dXNlcjpwdw==", "Bearer not-a-token"])
    async def test_bad_token_is_forbidden(self, header):
        with pytest.raises(AccessDeniedError, match="Invalid token"):
            await self.session.authenticate(header)

    async def test_foreign_signing_key_is_forbidden(self):
        token = TokenService("another-key").issue(uuid4())
        with pytest.raises(AccessDeniedError):
            await self.session.authenticate(f"Bearer {token}")

    async def test_expired_token_is_forbidden(self, monkeypatch):
        token = self.core.token_service.issue(uuid4())
        monkeypatch.setattr(token_module, "now", lambda: now() + timedelta(hours=1, seconds=1))
        with pytest.raises(AccessDeniedError):
            await self.session.authenticate(f"Bearer {token}")

    async def test_forbidden_is_not_unauthenticated(self):
        with pytest.raises(AccessDeniedError) as exc_info:
            await self.session.authenticate("Bearer junk")
        assert not isinstance(exc_info.value, AuthenticationError)
