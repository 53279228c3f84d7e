"""
Health Data Models - Profiles, metric records and advice callbacks.
"""

from datetime import datetime, date, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, EmailStr, Field

USERNAME_PATTERN = r"^[A-Za-z0-9_.@-]+$"


class HealthMetricType(str, Enum):
    """Kinds of measurement a user can record."""
    HEART_RATE = "HEART_RATE"  # bpm
    BLOOD_PRESSURE = "BLOOD_PRESSURE"  # systolic mmHg
    BLOOD_SUGAR_LEVEL = "BLOOD_SUGAR_LEVEL"  # mmol/L
    BLOOD_OXYGEN_LEVEL = "BLOOD_OXYGEN_LEVEL"  # SpO2 %
    BODY_TEMPERATURE = "BODY_TEMPERATURE"  # celsius
    WEIGHT = "WEIGHT"  # kg


class HealthProfile(BaseModel):
    """Per-user health profile, keyed by username."""
    username: str = Field(..., min_length=3, max_length=50, pattern=USERNAME_PATTERN)
    full_name: Optional[str] = None
    email: Optional[EmailStr] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    height_cm: Optional[float] = Field(default=None, gt=0)
    phone: Optional[str] = None


class ProfileReference(BaseModel):
    """Reference from a metric to the profile that owns it."""
    username: str = Field(..., min_length=3, max_length=50, pattern=USERNAME_PATTERN)


class HealthMetric(BaseModel):
    """A single measurement belonging to one profile."""
    type: HealthMetricType
    value: float
    profile: ProfileReference
    recorded_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def username(self) -> str:
        return self.profile.username


class HealthAdvice(BaseModel):
    """Advice pushed back to us by an external health advisor."""
    username: str
    advice: str
