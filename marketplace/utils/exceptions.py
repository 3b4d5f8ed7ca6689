"""
Service exceptions
Domain errors mapped onto HTTP status codes by the application handlers
"""

from typing import Any, Dict


class MarketplaceError(Exception):
    """Base marketplace error"""

    status_code: int = 500
    code: str = "internal_error"
    message: str = "Internal server error"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Error envelope returned to clients"""
        return {
            "success": False,
            "message": self.message
        }


class DuplicateEmail(MarketplaceError):
    status_code = 400
    code = "duplicate_email"
    message = "User already exists with this email"


class InvalidCredentials(MarketplaceError):
    status_code = 401
    code = "invalid_credentials"
    message = "Invalid email or password"


class MissingToken(MarketplaceError):
    status_code = 401
    code = "missing_token"
    message = "Authentication required"


class InvalidToken(MarketplaceError):
    status_code = 403
    code = "invalid_token"
    message = "Invalid or expired token"


class AccountNotFound(MarketplaceError):
    status_code = 404
    code = "account_not_found"
    message = "User not found"


class ProfileAlreadyExists(MarketplaceError):
    status_code = 400
    code = "profile_already_exists"
    message = "Profile already exists"


class InternalError(MarketplaceError):
    """Catch-all for unexpected failures"""
