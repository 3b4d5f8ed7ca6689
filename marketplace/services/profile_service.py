"""
Profile Service
Role assignment, profile completion and the account dashboard
"""

import random
import uuid
from typing import Any, Dict, List, Optional
import logging

from marketplace.models.user import Account, Profile, Role, RoleId, ROLES, utcnow
from marketplace.schemas.user import DashboardSchema, DashboardStatsSchema
from marketplace.utils.exceptions import AccountNotFound, ProfileAlreadyExists
from marketplace.utils.logger import get_audit_logger
from marketplace.utils.store import MarketplaceStore
from marketplace.utils.unique_id import generate_unique_id

logger = logging.getLogger(__name__)
audit_logger = get_audit_logger()


class ProfileService:
    """Profile and role operations over the in-memory store"""

    def __init__(self, store: MarketplaceStore, unique_id_max_attempts: int = 5):
        self.store = store
        self.unique_id_max_attempts = unique_id_max_attempts

    @staticmethod
    def list_roles() -> List[Role]:
        """Static role catalogue"""
        return list(ROLES)

    def _get_account(self, account_id: str) -> Account:
        account = self.store.get_account_by_id(account_id)
        if not account:
            raise AccountNotFound()
        return account

    async def get_profile(self, account_id: str) -> Dict:
        """
        Get account summary and its profile

        Args:
            account_id: Account ID

        Returns:
            dict: {'account': Account, 'profile': Profile or None}

        Raises:
            AccountNotFound: If the account id is unknown
        """
        account = self._get_account(account_id)
        return {
            'account': account,
            'profile': self.store.get_profile(account_id)
        }

    async def complete_profile(
        self,
        account_id: str,
        role: RoleId,
        profile_data: Optional[Dict[str, Any]] = None,
        business_initials: Optional[str] = None,
        chosen_number: Optional[int] = None
    ) -> Dict:
        """
        Attach a role, profile payload and generated unique ID to an account

        Args:
            account_id: Account ID
            role: Selected role
            profile_data: Free-form role-specific payload
            business_initials: Initials for BusinessOwner and Wholesaler IDs
            chosen_number: Number for BusinessOwner and Wholesaler IDs

        Returns:
            dict: {'account': Account, 'profile': Profile}

        Raises:
            AccountNotFound: If the account id is unknown
            ProfileAlreadyExists: If the account already completed its profile
        """
        account = self._get_account(account_id)

        if self.store.get_profile(account_id) is not None:
            logger.info(f"Profile completion rejected, already exists: {account_id}")
            raise ProfileAlreadyExists()

        unique_id = generate_unique_id(
            role,
            business_initials=business_initials,
            chosen_number=chosen_number,
            exists=self.store.unique_id_exists,
            max_attempts=self.unique_id_max_attempts
        )

        now = utcnow()
        profile = Profile(
            id=str(uuid.uuid4()),
            user_id=account_id,
            unique_id=unique_id,
            role=role,
            profile_data=profile_data or {},
            created_at=now,
            updated_at=now
        )
        self.store.add_profile(profile)

        account.role = role
        account.unique_id = unique_id
        account.profile_completed = True

        logger.info(f"Profile created for {account_id}: {unique_id} ({role.value})")
        audit_logger.log_user_action(
            account_id, "complete_profile", "profile", profile.id,
            details={'role': role.value, 'unique_id': unique_id}
        )

        return {
            'account': account,
            'profile': profile
        }

    async def get_dashboard(self, account_id: str) -> DashboardSchema:
        """
        Build placeholder dashboard metrics

        The numbers are random on every call; nothing is tracked.
        """
        account = self._get_account(account_id)

        stats = DashboardStatsSchema(
            total_bookings=random.randint(0, 100),
            active_services=random.randint(0, 20),
            pending_requests=random.randint(0, 10),
            rating=round(random.uniform(3.5, 5.0), 1),
            earnings=round(random.uniform(0, 10000), 2)
        )

        recent_activity = [
            {
                'type': random.choice(['booking', 'review', 'message']),
                'description': f"Activity #{i + 1}",
                'timestamp': utcnow().isoformat()
            }
            for i in range(random.randint(0, 3))
        ]

        return DashboardSchema(
            welcome_message=f"Welcome back, {account.first_name}!",
            role=account.role,
            unique_id=account.unique_id,
            profile_completed=account.profile_completed,
            stats=stats,
            recent_activity=recent_activity
        )
