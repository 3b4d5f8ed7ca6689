"""
User Models
In-memory record definitions for accounts, profiles and roles
"""

from typing import Optional, Dict, Any, List
from datetime import datetime, timezone
from dataclasses import dataclass, field
from enum import Enum


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RoleId(str, Enum):
    """Marketplace role enumeration"""
    CUSTOMER = "Customer"
    BUSINESS_OWNER = "BusinessOwner"
    SERVICE_PROVIDER = "ServiceProvider"
    WHOLESALER = "Wholesaler"


# Roles whose unique ID is built from business initials and a chosen number
BUSINESS_ROLES = frozenset({RoleId.BUSINESS_OWNER, RoleId.WHOLESALER})


@dataclass(frozen=True)
class Role:
    """Static role catalogue entry"""
    id: RoleId
    name: str
    description: str
    icon: str


ROLES: List[Role] = [
    Role(
        id=RoleId.CUSTOMER,
        name="Customer",
        description="Find and book services from trusted local businesses",
        icon="fas fa-user"
    ),
    Role(
        id=RoleId.BUSINESS_OWNER,
        name="Business Owner",
        description="Manage your business and connect with customers",
        icon="fas fa-briefcase"
    ),
    Role(
        id=RoleId.SERVICE_PROVIDER,
        name="Service Provider",
        description="Offer your professional services to the community",
        icon="fas fa-tools"
    ),
    Role(
        id=RoleId.WHOLESALER,
        name="Wholesaler",
        description="Supply products to businesses and retailers",
        icon="fas fa-warehouse"
    ),
]


@dataclass
class Account:
    """Registered account record"""
    id: str
    email: str
    password: str  # plaintext, demo only
    first_name: str
    last_name: str
    phone: Optional[str] = None
    created_at: datetime = field(default_factory=utcnow)
    role: Optional[RoleId] = None
    unique_id: Optional[str] = None
    profile_completed: bool = False


@dataclass
class Profile:
    """Completed profile, one per account"""
    id: str
    user_id: str
    unique_id: str
    role: RoleId
    profile_data: Dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=utcnow)
    updated_at: datetime = field(default_factory=utcnow)
