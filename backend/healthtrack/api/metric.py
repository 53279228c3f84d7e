"""
Health metric API endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from ..models import HealthMetric, Principal
from ..services import HealthMetricService
from ..utils.auth import get_current_principal
from .deps import get_health_metric_service, raise_for_outcome

router = APIRouter(prefix="/metric", tags=["metric"])


@router.post("")
async def add_health_metric(
    metric: HealthMetric,
    principal: Principal = Depends(get_current_principal),
    service: HealthMetricService = Depends(get_health_metric_service)
):
    """
    Record a metric for the caller's own profile.

    Raises:
        HTTPException: 403 for another user's profile, 404 if the profile doesn't exist
    """
    raise_for_outcome(await service.add_health_metric(principal, metric))
    return Response(status_code=status.HTTP_200_OK)


@router.get("/{username}", response_model=List[HealthMetric])
async def find_health_metric_history(
    username: str,
    principal: Principal = Depends(get_current_principal),
    service: HealthMetricService = Depends(get_health_metric_service)
):
    """Get a user's metric history, oldest first."""
    return raise_for_outcome(await service.find_health_metric_history(principal, username))


@router.delete("/{username}")
async def delete_health_metric_for_user(
    username: str,
    principal: Principal = Depends(get_current_principal),
    service: HealthMetricService = Depends(get_health_metric_service)
):
    """Delete every metric recorded for a user. Admin only."""
    raise_for_outcome(await service.delete_health_metric_for_user(principal, username))
    return Response(status_code=status.HTTP_200_OK)
