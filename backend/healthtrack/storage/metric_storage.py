"""
Metric Storage - MetricStore implementations.
"""

from typing import Dict, List

from pydantic import TypeAdapter, ValidationError

from ..models import HealthMetric, HealthProfile
from .interface import MetricStore, StorageInterface, StorageError

_history_adapter = TypeAdapter(List[HealthMetric])


class InMemoryMetricStore(MetricStore):
    """Keeps metric history per username in insertion order."""

    def __init__(self):
        self._history: Dict[str, List[HealthMetric]] = {}

    async def find_history(self, username: str) -> List[HealthMetric]:
        return [m.model_copy(deep=True) for m in self._history.get(username, [])]

    async def save(self, metric: HealthMetric) -> None:
        self._history.setdefault(metric.username, []).append(metric.model_copy(deep=True))

    async def delete_all_for_user(self, profile: HealthProfile) -> None:
        self._history.pop(profile.username, None)


class LocalMetricStore(MetricStore):
    """
    Stores the metric history of each user as a JSON array.
    New records are appended, so file order is insertion order.
    """

    def __init__(self, storage: StorageInterface):
        self.storage = storage
        self.metrics_dir = "metrics"

    def _history_path(self, username: str) -> str:
        return f"{self.metrics_dir}/{username}.json"

    async def find_history(self, username: str) -> List[HealthMetric]:
        content = await self.storage.load(self._history_path(username))
        if content is None:
            return []

        try:
            return _history_adapter.validate_json(content)
        except ValidationError as e:
            raise StorageError(f"Corrupt metric history for {username}: {e}") from e

    async def save(self, metric: HealthMetric) -> None:
        history = await self.find_history(metric.username)
        history.append(metric)
        await self.storage.save(
            self._history_path(metric.username),
            _history_adapter.dump_json(history, indent=2)
        )

    async def delete_all_for_user(self, profile: HealthProfile) -> None:
        await self.storage.delete(self._history_path(profile.username))
