"""
Store Factory - Creates and holds the configured profile and metric stores.
"""

from typing import Any, Optional, Tuple

from .interface import ProfileStore, MetricStore
from .local_storage import LocalStorage
from .profile_storage import InMemoryProfileStore, LocalProfileStore
from .metric_storage import InMemoryMetricStore, LocalMetricStore


def create_stores(
    storage_type: str = "memory",
    local_storage_path: str = "./data"
) -> Tuple[ProfileStore, MetricStore]:
    """
    Create a profile store and a metric store of the requested kind.

    Args:
        storage_type: "memory" or "local"
        local_storage_path: Base directory used by the "local" kind

    Returns:
        (ProfileStore, MetricStore) pair sharing the same backend
    """
    if storage_type == "memory":
        return InMemoryProfileStore(), InMemoryMetricStore()

    elif storage_type == "local":
        storage = LocalStorage(local_storage_path)
        return LocalProfileStore(storage), LocalMetricStore(storage)

    else:
        raise ValueError(f"Unsupported storage type: {storage_type}")


# Global store instances
_profile_store: Optional[ProfileStore] = None
_metric_store: Optional[MetricStore] = None


def init_stores(config: Any) -> None:
    """
    Initialize the global stores from application settings.

    Args:
        config: Settings object with ``storage_type`` and ``local_storage_path``
    """
    global _profile_store, _metric_store
    _profile_store, _metric_store = create_stores(
        config.storage_type, config.local_storage_path
    )


def get_profile_store() -> ProfileStore:
    """
    Raises:
        RuntimeError: If the stores have not been initialized
    """
    if _profile_store is None:
        raise RuntimeError("Stores not initialized. Call init_stores() first.")
    return _profile_store


def get_metric_store() -> MetricStore:
    """
    Raises:
        RuntimeError: If the stores have not been initialized
    """
    if _metric_store is None:
        raise RuntimeError("Stores not initialized. Call init_stores() first.")
    return _metric_store
