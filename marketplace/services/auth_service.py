"""
Authentication Service
Account registration, login and session token resolution
"""

import secrets
import uuid
from typing import Dict, Optional
import logging

from marketplace.models.user import Account
from marketplace.schemas.user import UserCreateSchema
from marketplace.utils.exceptions import (
    DuplicateEmail, InvalidCredentials, MissingToken, InvalidToken
)
from marketplace.utils.logger import get_audit_logger
from marketplace.utils.store import MarketplaceStore

logger = logging.getLogger(__name__)
audit_logger = get_audit_logger()


class AuthService:
    """Identity and session operations over the in-memory store"""

    def __init__(self, store: MarketplaceStore):
        self.store = store

    @staticmethod
    def generate_session_token() -> str:
        """Generate opaque session token"""
        return secrets.token_urlsafe(32)

    def _issue_session(self, account_id: str) -> str:
        token = self.generate_session_token()
        while self.store.get_session(token) is not None:
            token = self.generate_session_token()
        self.store.create_session(account_id, token)
        return token

    async def register_account(self, account_data: UserCreateSchema) -> Dict:
        """
        Register new account

        Args:
            account_data: Registration payload

        Returns:
            dict: {'account': Account, 'token': str}

        Raises:
            DuplicateEmail: If the exact email is already registered
        """
        if self.store.email_exists(account_data.email):
            logger.info("Registration rejected: email already registered")
            raise DuplicateEmail()

        account = Account(
            id=str(uuid.uuid4()),
            email=account_data.email,
            password=account_data.password,
            first_name=account_data.first_name,
            last_name=account_data.last_name,
            phone=account_data.phone
        )
        self.store.add_account(account)
        token = self._issue_session(account.id)

        logger.info(f"Account registered: {account.id}")
        audit_logger.log_user_action(account.id, "register", "account", account.id)

        return {
            'account': account,
            'token': token
        }

    async def authenticate_account(self, email: str, password: str) -> Dict:
        """
        Authenticate account and issue a fresh session token

        Args:
            email: Account email, matched exactly
            password: Account password

        Returns:
            dict: {'account': Account, 'token': str, 'needs_profile_completion': bool}

        Raises:
            InvalidCredentials: If no account matches both fields
        """
        account = self.store.get_account_by_email(email)
        if not account or not secrets.compare_digest(
            account.password.encode('utf-8'), password.encode('utf-8')
        ):
            logger.info("Login rejected: invalid credentials")
            raise InvalidCredentials()

        token = self._issue_session(account.id)
        needs_profile_completion = self.store.get_profile(account.id) is None

        logger.info(f"Account authenticated: {account.id}")
        audit_logger.log_user_action(account.id, "login", "session")

        return {
            'account': account,
            'token': token,
            'needs_profile_completion': needs_profile_completion
        }

    async def resolve_session(self, session_token: Optional[str]) -> str:
        """
        Resolve a bearer token to its account id

        Raises:
            MissingToken: If no token was supplied
            InvalidToken: If the token was never issued
        """
        if not session_token:
            raise MissingToken()

        account_id = self.store.get_session(session_token)
        if account_id is None:
            raise InvalidToken()

        return account_id
