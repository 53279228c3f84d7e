"""
Health Profile Service - authorization and existence rules around profiles.
"""

from typing import Optional

from ..core import policy
from ..core.locks import UsernameLocks
from ..core.outcomes import Ok, Forbidden, NotFound, AlreadyExists, Outcome, PROFILE
from ..models import Principal, HealthProfile
from ..storage import ProfileStore


class HealthProfileService:
    """
    Profile CRUD on behalf of a principal.

    Each operation checks the policy before looking at the store, so a
    caller without access gets ``Forbidden`` whether or not the profile
    exists.
    """

    def __init__(self, profile_store: ProfileStore, locks: Optional[UsernameLocks] = None):
        self.profile_store = profile_store
        self.locks = locks if locks is not None else UsernameLocks()

    async def add_health_profile(
        self,
        principal: Principal,
        profile: HealthProfile
    ) -> Outcome[None]:
        """Register ``profile``; only its owner may do so, and only once."""
        if not policy.may_create(principal, profile.username):
            return Forbidden(f"'{principal.username}' cannot create a profile for '{profile.username}'")

        async with self.locks.hold(profile.username):
            if await self.profile_store.find_by_username(profile.username) is not None:
                return AlreadyExists(PROFILE, profile.username)

            await self.profile_store.save(profile)

        return Ok()

    async def find_health_profile(
        self,
        principal: Principal,
        username: str
    ) -> Outcome[HealthProfile]:
        """Return the profile of ``username`` to its owner or an admin."""
        if not policy.may_read(principal, username):
            return Forbidden(f"'{principal.username}' cannot read the profile of '{username}'")

        profile = await self.profile_store.find_by_username(username)
        if profile is None:
            return NotFound(PROFILE, username)

        return Ok(profile)

    async def delete_health_profile(
        self,
        principal: Principal,
        username: str
    ) -> Outcome[None]:
        """Remove the profile of ``username``. Admin only."""
        if not policy.may_delete(principal):
            return Forbidden("Only administrators can delete profiles")

        async with self.locks.hold(username):
            profile = await self.profile_store.find_by_username(username)
            if profile is None:
                return NotFound(PROFILE, username)

            await self.profile_store.delete(profile)

        return Ok()
