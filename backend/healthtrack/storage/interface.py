"""
Storage Interfaces - Abstract contracts for persistence.

``StorageInterface`` is a raw document store addressed by relative paths.
``ProfileStore`` and ``MetricStore`` are the collaborators the services use;
they are keyed by username and carry no business rules.
"""

from abc import ABC, abstractmethod
from typing import Optional, List

from ..models import HealthProfile, HealthMetric


class StorageError(Exception):
    """Raised when the underlying storage cannot complete an operation."""


class StorageInterface(ABC):
    """
    Abstract document storage. Implementations raise ``StorageError`` on
    failure instead of returning a status flag.
    """

    @abstractmethod
    async def save(self, path: str, content: bytes | str) -> None:
        """
        Save content to the specified path, replacing what was there.

        Args:
            path: Relative path (e.g., "profiles/alice.json")
            content: Text or binary content
        """
        pass

    @abstractmethod
    async def load(self, path: str) -> Optional[bytes]:
        """
        Load content from the specified path.

        Returns:
            Optional[bytes]: File content, or None if the file doesn't exist
        """
        pass

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Check if a file exists at the specified path."""
        pass

    @abstractmethod
    async def delete(self, path: str) -> bool:
        """
        Delete the file at the specified path.

        Returns:
            bool: True if a file was removed, False if there was none
        """
        pass


class ProfileStore(ABC):
    """Persistence for health profiles, at most one per username."""

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[HealthProfile]:
        pass

    @abstractmethod
    async def save(self, profile: HealthProfile) -> None:
        pass

    @abstractmethod
    async def delete(self, profile: HealthProfile) -> None:
        pass


class MetricStore(ABC):
    """Persistence for metric history, kept in insertion order per username."""

    @abstractmethod
    async def find_history(self, username: str) -> List[HealthMetric]:
        pass

    @abstractmethod
    async def save(self, metric: HealthMetric) -> None:
        pass

    @abstractmethod
    async def delete_all_for_user(self, profile: HealthProfile) -> None:
        pass
