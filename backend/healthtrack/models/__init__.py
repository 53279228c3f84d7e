"""Models module."""

from .principal import Principal
from .health import HealthProfile, HealthMetric, HealthMetricType, ProfileReference, HealthAdvice

__all__ = [
    'Principal',
    'HealthProfile', 'HealthMetric', 'HealthMetricType', 'ProfileReference', 'HealthAdvice',
]
