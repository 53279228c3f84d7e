"""HealthTrack API - health profiles and metrics with per-user access control."""

__version__ = "1.0.0"
