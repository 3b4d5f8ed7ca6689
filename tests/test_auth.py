"""
Authentication Tests
"""

import pytest

from marketplace.schemas.user import UserCreateSchema, UserSummarySchema
from marketplace.services.auth_service import AuthService
from marketplace.utils.exceptions import (
    DuplicateEmail, InvalidCredentials, MissingToken, InvalidToken
)


class TestAuthService:
    def test_generate_session_token(self):
        token = AuthService.generate_session_token()
        assert len(token) > 20
        assert token != AuthService.generate_session_token()

    @pytest.mark.asyncio
    async def test_register_issues_working_token(self, auth_service, sample_account_data, store):
        result = await auth_service.register_account(sample_account_data)

        account = result['account']
        assert account.email == "jane@example.com"
        assert account.profile_completed is False
        assert account.role is None
        assert await auth_service.resolve_session(result['token']) == account.id
        assert 'password' not in UserSummarySchema.model_validate(account).to_response()

    @pytest.mark.asyncio
    async def test_register_duplicate_email(self, auth_service, sample_account_data, store):
        await auth_service.register_account(sample_account_data)

        with pytest.raises(DuplicateEmail):
            await auth_service.register_account(sample_account_data)

        assert store.stats()['accounts'] == 1
        assert store.stats()['sessions'] == 1

    @pytest.mark.asyncio
    async def test_email_match_is_case_sensitive(self, auth_service, sample_account_data, store):
        await auth_service.register_account(sample_account_data)

        other = UserCreateSchema(
            email="Jane@Example.com", password="x", first_name="J", last_name="D"
        )
        await auth_service.register_account(other)
        assert store.stats()['accounts'] == 2

    @pytest.mark.asyncio
    async def test_login_issues_fresh_token(self, auth_service, sample_account_data):
        registered = await auth_service.register_account(sample_account_data)

        result = await auth_service.authenticate_account("jane@example.com", "secret-pass")

        assert result['token'] != registered['token']
        assert result['needs_profile_completion'] is True
        # earlier tokens stay valid
        assert await auth_service.resolve_session(registered['token']) == registered['account'].id
        assert await auth_service.resolve_session(result['token']) == registered['account'].id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("email,password", [
        ("jane@example.com", "wrong"),
        ("nobody@example.com", "secret-pass"),
        ("JANE@example.com", "secret-pass"),
    ])
    async def test_login_invalid_credentials(self, auth_service, sample_account_data, store, email, password):
        await auth_service.register_account(sample_account_data)

        with pytest.raises(InvalidCredentials):
            await auth_service.authenticate_account(email, password)

        assert store.stats()['sessions'] == 1

    @pytest.mark.asyncio
    async def test_resolve_missing_token(self, auth_service):
        with pytest.raises(MissingToken):
            await auth_service.resolve_session(None)
        with pytest.raises(MissingToken):
            await auth_service.resolve_session("")

    @pytest.mark.asyncio
    async def test_resolve_unknown_token(self, auth_service):
        with pytest.raises(InvalidToken):
            await auth_service.resolve_session("not-a-session")
