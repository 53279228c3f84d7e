"""Storage module - persistence contracts and their implementations."""

from .interface import StorageInterface, StorageError, ProfileStore, MetricStore
from .local_storage import LocalStorage
from .profile_storage import InMemoryProfileStore, LocalProfileStore
from .metric_storage import InMemoryMetricStore, LocalMetricStore
from .factory import create_stores, init_stores, get_profile_store, get_metric_store

__all__ = [
    'StorageInterface', 'StorageError', 'ProfileStore', 'MetricStore',
    'LocalStorage',
    'InMemoryProfileStore', 'LocalProfileStore',
    'InMemoryMetricStore', 'LocalMetricStore',
    'create_stores', 'init_stores', 'get_profile_store', 'get_metric_store',
]
