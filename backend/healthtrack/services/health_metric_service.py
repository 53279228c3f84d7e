"""
Health Metric Service - authorization and existence rules around metric records.

A metric can only be recorded against an existing profile. Reading history
does not need the profile to exist; deleting history does.
"""

from typing import List, Optional

from ..core import policy
from ..core.locks import UsernameLocks
from ..core.outcomes import Ok, Forbidden, NotFound, Outcome, PROFILE
from ..models import Principal, HealthMetric, ProfileReference
from ..storage import ProfileStore, MetricStore


class HealthMetricService:
    """Metric record operations on behalf of a principal."""

    def __init__(
        self,
        metric_store: MetricStore,
        profile_store: ProfileStore,
        locks: Optional[UsernameLocks] = None
    ):
        self.metric_store = metric_store
        self.profile_store = profile_store
        self.locks = locks if locks is not None else UsernameLocks()

    async def add_health_metric(
        self,
        principal: Principal,
        metric: HealthMetric
    ) -> Outcome[None]:
        """
        Record ``metric`` for the profile it references.

        Only the owner of the referenced profile may add to it, and the
        profile must already exist. The stored record is bound to the
        profile as found in the store.
        """
        username = metric.profile.username
        if not policy.may_create(principal, username):
            return Forbidden(f"'{principal.username}' cannot add metrics for '{username}'")

        async with self.locks.hold(username):
            profile = await self.profile_store.find_by_username(username)
            if profile is None:
                return NotFound(PROFILE, username)

            await self.metric_store.save(
                metric.model_copy(update={"profile": ProfileReference(username=profile.username)})
            )

        return Ok()

    async def find_health_metric_history(
        self,
        principal: Principal,
        username: str
    ) -> Outcome[List[HealthMetric]]:
        """Return every metric of ``username`` in the order it was recorded."""
        if not policy.may_read(principal, username):
            return Forbidden(f"'{principal.username}' cannot read the metrics of '{username}'")

        return Ok(await self.metric_store.find_history(username))

    async def delete_health_metric_for_user(
        self,
        principal: Principal,
        username: str
    ) -> Outcome[None]:
        """Remove all metrics of ``username``. Admin only."""
        if not policy.may_delete(principal):
            return Forbidden("Only administrators can delete metric records")

        async with self.locks.hold(username):
            profile = await self.profile_store.find_by_username(username)
            if profile is None:
                return NotFound(PROFILE, username)

            await self.metric_store.delete_all_for_user(profile)

        return Ok()
