"""
Profile Storage - ProfileStore implementations.
"""

from typing import Dict, Optional

from pydantic import ValidationError

from ..models import HealthProfile
from .interface import ProfileStore, StorageInterface, StorageError


class InMemoryProfileStore(ProfileStore):
    """Keeps profiles in a dict; contents are lost on restart."""

    def __init__(self):
        self._profiles: Dict[str, HealthProfile] = {}

    async def find_by_username(self, username: str) -> Optional[HealthProfile]:
        profile = self._profiles.get(username)
        return profile.model_copy(deep=True) if profile is not None else None

    async def save(self, profile: HealthProfile) -> None:
        self._profiles[profile.username] = profile.model_copy(deep=True)

    async def delete(self, profile: HealthProfile) -> None:
        self._profiles.pop(profile.username, None)


class LocalProfileStore(ProfileStore):
    """
    Stores each profile as a JSON document.
    Uses one file per user in the profiles/ directory.
    """

    def __init__(self, storage: StorageInterface):
        """
        Args:
            storage: StorageInterface implementation (typically LocalStorage)
        """
        self.storage = storage
        self.profiles_dir = "profiles"

    def _profile_path(self, username: str) -> str:
        return f"{self.profiles_dir}/{username}.json"

    async def find_by_username(self, username: str) -> Optional[HealthProfile]:
        content = await self.storage.load(self._profile_path(username))
        if content is None:
            return None

        try:
            return HealthProfile.model_validate_json(content)
        except ValidationError as e:
            raise StorageError(f"Corrupt profile document for {username}: {e}") from e

    async def save(self, profile: HealthProfile) -> None:
        await self.storage.save(
            self._profile_path(profile.username),
            profile.model_dump_json(indent=2)
        )

    async def delete(self, profile: HealthProfile) -> None:
        await self.storage.delete(self._profile_path(profile.username))
