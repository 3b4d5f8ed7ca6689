"""
User Profile Routes
Profile lookup, role selection with profile completion, and dashboard
"""

from fastapi import APIRouter
import logging

from marketplace.schemas.user import CompleteProfileSchema, ProfileSchema, UserSummarySchema
from marketplace.utils.dependencies import CurrentAccountId, ProfileServiceDep, SessionToken

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/profile", response_model=dict)
async def get_account_profile(
    account_id: CurrentAccountId,
    profile_service: ProfileServiceDep
):
    """
    Get account profile

    ``profile`` is null until the account completes its profile
    """
    result = await profile_service.get_profile(account_id)
    profile = result['profile']

    return {
        "success": True,
        "user": UserSummarySchema.model_validate(result['account']).to_response(),
        "profile": ProfileSchema.model_validate(profile).to_response() if profile else None
    }


@router.post("/complete-profile", response_model=dict)
async def complete_account_profile(
    profile_request: CompleteProfileSchema,
    account_id: CurrentAccountId,
    session_token: SessionToken,
    profile_service: ProfileServiceDep
):
    """
    Complete account profile

    Assigns the role and generates the account's unique ID; allowed once
    """
    result = await profile_service.complete_profile(
        account_id,
        profile_request.role,
        profile_data=profile_request.profile_data,
        business_initials=profile_request.business_initials,
        chosen_number=profile_request.user_chosen_number
    )

    return {
        "success": True,
        "message": "Profile completed successfully",
        "token": session_token,
        "user": UserSummarySchema.model_validate(result['account']).to_response(),
        "profile": ProfileSchema.model_validate(result['profile']).to_response()
    }


@router.get("/dashboard", response_model=dict)
async def get_account_dashboard(
    account_id: CurrentAccountId,
    profile_service: ProfileServiceDep
):
    """Placeholder dashboard metrics"""
    dashboard = await profile_service.get_dashboard(account_id)

    return {
        "success": True,
        "dashboardData": dashboard.to_response()
    }
