"""
Authentication Routes
Account registration and login
"""

from fastapi import APIRouter
import logging

from marketplace.schemas.user import UserCreateSchema, UserLoginSchema, UserSummarySchema
from marketplace.utils.dependencies import AuthServiceDep

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=dict)
async def register_account(
    account_data: UserCreateSchema,
    auth_service: AuthServiceDep
):
    """
    Register new account

    Creates the account and signs it in with a fresh session token
    """
    result = await auth_service.register_account(account_data)
    user = UserSummarySchema.model_validate(result['account'])

    return {
        "success": True,
        "message": "Registration successful",
        "token": result['token'],
        "user": user.to_response()
    }


@router.post("/login", response_model=dict)
async def login_account(
    login_data: UserLoginSchema,
    auth_service: AuthServiceDep
):
    """
    Account login

    Issues a new session token; earlier tokens stay valid
    """
    result = await auth_service.authenticate_account(login_data.email, login_data.password)
    user = UserSummarySchema.model_validate(result['account'])

    return {
        "success": True,
        "message": "Login successful",
        "needsProfileCompletion": result['needs_profile_completion'],
        "token": result['token'],
        "user": user.to_response()
    }
