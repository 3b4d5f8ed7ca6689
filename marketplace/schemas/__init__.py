"""
Data schemas for marketplace service
"""

from .user import (
    RoleSchema,
    UserCreateSchema,
    UserLoginSchema,
    CompleteProfileSchema,
    UserSummarySchema,
    ProfileSchema,
    DashboardStatsSchema,
    DashboardSchema,
)

__all__ = [
    "RoleSchema",
    "UserCreateSchema",
    "UserLoginSchema",
    "CompleteProfileSchema",
    "UserSummarySchema",
    "ProfileSchema",
    "DashboardStatsSchema",
    "DashboardSchema",
]
