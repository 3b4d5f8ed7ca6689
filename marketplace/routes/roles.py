"""
Role Routes
Static role catalogue
"""

from fastapi import APIRouter

from marketplace.schemas.user import RoleSchema
from marketplace.services.profile_service import ProfileService

router = APIRouter()


@router.get("/roles", response_model=dict)
async def list_roles():
    """List selectable roles"""
    return {
        "success": True,
        "data": [
            RoleSchema.model_validate(role).to_response()
            for role in ProfileService.list_roles()
        ]
    }
