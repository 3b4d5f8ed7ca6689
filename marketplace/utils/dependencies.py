"""
FastAPI Dependencies
Store access, services and bearer-token authentication
"""

from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from typing import Optional, Annotated
import logging

from marketplace.services.auth_service import AuthService
from marketplace.services.profile_service import ProfileService
from marketplace.utils.config import AppConfig
from marketplace.utils.store import MarketplaceStore

logger = logging.getLogger(__name__)

# Missing or malformed headers are reported as MissingToken, not by FastAPI
security = HTTPBearer(auto_error=False)


def get_store(request: Request) -> MarketplaceStore:
    """Store attached to the running application"""
    return request.app.state.store


def get_config(request: Request) -> AppConfig:
    """Configuration attached to the running application"""
    return request.app.state.config


def get_auth_service(
    store: MarketplaceStore = Depends(get_store)
) -> AuthService:
    return AuthService(store)


def get_profile_service(
    store: MarketplaceStore = Depends(get_store),
    config: AppConfig = Depends(get_config)
) -> ProfileService:
    return ProfileService(store, unique_id_max_attempts=config.unique_id_max_attempts)


def get_session_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security)
) -> Optional[str]:
    """Raw bearer token, or None when absent"""
    if credentials is None:
        return None
    return credentials.credentials


async def get_current_account_id(
    request: Request,
    session_token: Optional[str] = Depends(get_session_token),
    auth_service: AuthService = Depends(get_auth_service)
) -> str:
    """
    Resolve the caller's account id from the bearer token

    Raises:
        MissingToken: No bearer token supplied
        InvalidToken: Token is not a known session
    """
    account_id = await auth_service.resolve_session(session_token)
    request.state.account_id = account_id
    return account_id


# Type aliases for cleaner dependency injection
StoreDep = Annotated[MarketplaceStore, Depends(get_store)]
AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
ProfileServiceDep = Annotated[ProfileService, Depends(get_profile_service)]
SessionToken = Annotated[Optional[str], Depends(get_session_token)]
CurrentAccountId = Annotated[str, Depends(get_current_account_id)]
