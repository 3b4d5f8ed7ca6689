"""
Business logic services for marketplace service
"""

from .auth_service import AuthService
from .profile_service import ProfileService

__all__ = ["AuthService", "ProfileService"]
