"""API module."""

from .profile import router as profile_router
from .metric import router as metric_router
from .advice import router as advice_router

__all__ = ['profile_router', 'metric_router', 'advice_router']
