"""
In-memory Store
Process-local accounts, sessions and profiles

One instance is created per application and handed to request handlers
through dependencies. Every method is synchronous, so a coroutine that
calls them without awaiting in between sees a consistent view.
"""

import logging
from typing import Dict, Optional, Set

from marketplace.models.user import Account, Profile

logger = logging.getLogger(__name__)


class MarketplaceStore:
    """Owns all mutable service state"""

    def __init__(self):
        self._accounts: Dict[str, Account] = {}
        self._email_index: Dict[str, str] = {}
        self._sessions: Dict[str, str] = {}
        self._profiles: Dict[str, Profile] = {}
        self._unique_ids: Set[str] = set()

    # Accounts

    def add_account(self, account: Account) -> Account:
        """
        Insert a new account

        Raises:
            ValueError: If the id or email is already taken
        """
        if account.id in self._accounts:
            raise ValueError(f"Account id already exists: {account.id}")
        if account.email in self._email_index:
            raise ValueError("Account email already exists")

        self._accounts[account.id] = account
        self._email_index[account.email] = account.id
        logger.debug(f"Account stored: {account.id}")
        return account

    def get_account_by_id(self, account_id: str) -> Optional[Account]:
        return self._accounts.get(account_id)

    def get_account_by_email(self, email: str) -> Optional[Account]:
        """Exact, case-sensitive email lookup"""
        account_id = self._email_index.get(email)
        if account_id is None:
            return None
        return self._accounts.get(account_id)

    def email_exists(self, email: str) -> bool:
        return email in self._email_index

    # Sessions

    def create_session(self, account_id: str, session_token: str) -> None:
        """Bind a token to an account; earlier tokens stay valid"""
        if session_token in self._sessions:
            raise ValueError("Session token already issued")
        self._sessions[session_token] = account_id

    def get_session(self, session_token: str) -> Optional[str]:
        """Account id bound to the token, or None"""
        return self._sessions.get(session_token)

    # Profiles

    def add_profile(self, profile: Profile) -> Profile:
        """
        Insert the account's profile

        Raises:
            ValueError: If the account already has one or the unique ID is taken
        """
        if profile.user_id in self._profiles:
            raise ValueError(f"Profile already exists for account: {profile.user_id}")
        if profile.unique_id in self._unique_ids:
            raise ValueError(f"Unique ID already issued: {profile.unique_id}")

        self._profiles[profile.user_id] = profile
        self._unique_ids.add(profile.unique_id)
        return profile

    def get_profile(self, account_id: str) -> Optional[Profile]:
        return self._profiles.get(account_id)

    def unique_id_exists(self, unique_id: str) -> bool:
        return unique_id in self._unique_ids

    def stats(self) -> Dict[str, int]:
        """Record counts"""
        return {
            'accounts': len(self._accounts),
            'sessions': len(self._sessions),
            'profiles': len(self._profiles)
        }
