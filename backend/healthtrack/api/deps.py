"""
API dependencies - service providers and outcome translation.
"""

from typing import TypeVar

from fastapi import Depends, HTTPException, status

from ..core.locks import UsernameLocks
from ..core.outcomes import Ok, Forbidden, NotFound, AlreadyExists, Outcome
from ..services import HealthProfileService, HealthMetricService
from ..storage import ProfileStore, MetricStore, get_profile_store, get_metric_store

T = TypeVar("T")

# Shared by both services so profile deletes and metric writes for the
# same user never interleave
_username_locks = UsernameLocks()


def get_health_profile_service(
    profile_store: ProfileStore = Depends(get_profile_store)
) -> HealthProfileService:
    return HealthProfileService(profile_store, _username_locks)


def get_health_metric_service(
    metric_store: MetricStore = Depends(get_metric_store),
    profile_store: ProfileStore = Depends(get_profile_store)
) -> HealthMetricService:
    return HealthMetricService(metric_store, profile_store, _username_locks)


def raise_for_outcome(outcome: Outcome[T]) -> T:
    """
    Unwrap an ``Ok`` outcome or raise the matching HTTP error.

    Returns:
        The value carried by ``Ok``

    Raises:
        HTTPException: 403 for Forbidden, 404 for NotFound, 409 for AlreadyExists
    """
    if isinstance(outcome, Ok):
        return outcome.value

    if isinstance(outcome, Forbidden):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=outcome.reason)

    if isinstance(outcome, NotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=outcome.message)

    if isinstance(outcome, AlreadyExists):
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=outcome.message)

    raise TypeError(f"Unexpected service outcome: {outcome!r}")
