"""Services module - health profile and metric business rules."""

from .health_profile_service import HealthProfileService
from .health_metric_service import HealthMetricService

__all__ = ['HealthProfileService', 'HealthMetricService']
