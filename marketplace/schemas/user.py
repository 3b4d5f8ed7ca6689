"""
User data schemas for the marketplace service

Pydantic models for request validation and camelCase response serialization.
"""

import re
from typing import Optional, Dict, Any, List
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from marketplace.models.user import RoleId

INITIALS_PATTERN = re.compile(r'^[A-Za-z0-9]+$')


class CamelSchema(BaseModel):
    """Base schema exchanging camelCase keys with clients"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True
    )

    def to_response(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class RoleSchema(CamelSchema):
    """Role catalogue entry"""
    id: RoleId
    name: str
    description: str
    icon: str


class UserCreateSchema(CamelSchema):
    """Schema for registering a new account"""
    email: str = Field(..., min_length=1, max_length=254)
    password: str = Field(..., min_length=1, max_length=128)
    first_name: str = Field(..., min_length=1, max_length=50)
    last_name: str = Field(..., min_length=1, max_length=50)
    phone: Optional[str] = Field(None, max_length=32)


class UserLoginSchema(CamelSchema):
    """Schema for account login"""
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class CompleteProfileSchema(CamelSchema):
    """Schema for role selection and profile completion"""
    role: RoleId
    profile_data: Dict[str, Any] = Field(default_factory=dict)
    business_initials: Optional[str] = Field(None, max_length=10)
    user_chosen_number: Optional[int] = Field(None, ge=0, le=9999)

    @field_validator('profile_data', mode='before')
    @classmethod
    def default_profile_data(cls, v):
        """Treat a null payload as empty"""
        return {} if v is None else v

    @field_validator('business_initials', mode='before')
    @classmethod
    def strip_business_initials(cls, v):
        """Blank initials mean default; length is checked after stripping"""
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator('business_initials')
    @classmethod
    def validate_business_initials(cls, v):
        """Initials must be letters and digits"""
        if v is None:
            return None
        if not INITIALS_PATTERN.match(v):
            raise ValueError('Business initials may only contain letters and digits')
        return v.upper()


class UserSummarySchema(CamelSchema):
    """Account as returned to clients, credential omitted"""
    id: str
    email: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    role: Optional[RoleId] = None
    unique_id: Optional[str] = None
    profile_completed: bool = False


class ProfileSchema(CamelSchema):
    """Completed profile"""
    id: str
    user_id: str
    unique_id: str
    role: RoleId
    profile_data: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime
    updated_at: datetime


class DashboardStatsSchema(CamelSchema):
    """Placeholder dashboard metrics"""
    total_bookings: int = 0
    active_services: int = 0
    pending_requests: int = 0
    rating: float = 0.0
    earnings: float = 0.0


class DashboardSchema(CamelSchema):
    """Placeholder dashboard payload"""
    welcome_message: str
    role: Optional[RoleId] = None
    unique_id: Optional[str] = None
    profile_completed: bool = False
    stats: DashboardStatsSchema
    recent_activity: List[Dict[str, Any]] = Field(default_factory=list)
