"""
API routes for marketplace service
"""

from . import auth, users, roles, health

__all__ = ["auth", "users", "roles", "health"]
