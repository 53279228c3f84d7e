"""
Health profile API endpoints.
"""

from fastapi import APIRouter, Depends, Response, status

from ..models import HealthProfile, Principal
from ..services import HealthProfileService
from ..utils.auth import get_current_principal
from .deps import get_health_profile_service, raise_for_outcome

router = APIRouter(prefix="/profile", tags=["profile"])


@router.post("")
async def add_health_profile(
    profile: HealthProfile,
    principal: Principal = Depends(get_current_principal),
    service: HealthProfileService = Depends(get_health_profile_service)
):
    """
    Register the caller's own health profile.

    Raises:
        HTTPException: 403 for another user's profile, 409 if one already exists
    """
    raise_for_outcome(await service.add_health_profile(principal, profile))
    return Response(status_code=status.HTTP_200_OK)


@router.get("/{username}", response_model=HealthProfile)
async def find_health_profile(
    username: str,
    principal: Principal = Depends(get_current_principal),
    service: HealthProfileService = Depends(get_health_profile_service)
):
    """Get a profile. Owners can read their own, admins can read any."""
    return raise_for_outcome(await service.find_health_profile(principal, username))


@router.delete("/{username}")
async def delete_health_profile(
    username: str,
    principal: Principal = Depends(get_current_principal),
    service: HealthProfileService = Depends(get_health_profile_service)
):
    """Delete a profile. Admin only."""
    raise_for_outcome(await service.delete_health_profile(principal, username))
    return Response(status_code=status.HTTP_200_OK)
