"""
Data models for marketplace service
"""

from .user import Account, Profile, Role, RoleId, ROLES, BUSINESS_ROLES

__all__ = [
    "Account",
    "Profile",
    "Role",
    "RoleId",
    "ROLES",
    "BUSINESS_ROLES",
]
