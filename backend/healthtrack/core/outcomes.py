"""
Service outcomes - tagged result values returned by the service layer.

A service call returns exactly one of ``Ok``, ``Forbidden``, ``NotFound`` or
``AlreadyExists``. Callers dispatch on the variant:

    match await service.find_health_profile(principal, "alice"):
        case Ok(value=profile):
            ...
        case Forbidden() | NotFound():
            ...

Store failures are not outcomes; they propagate as exceptions.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")

PROFILE = "HealthProfile"


@dataclass(frozen=True)
class Ok(Generic[T]):
    """The operation succeeded, ``value`` is its result (None for mutations)."""
    value: T = None


@dataclass(frozen=True)
class Forbidden:
    """The principal is not allowed to perform the operation."""
    reason: str = "Access denied"


@dataclass(frozen=True)
class NotFound:
    """The target record does not exist."""
    entity: str
    username: str

    @property
    def message(self) -> str:
        return f"{self.entity} for user '{self.username}' does not exist"


@dataclass(frozen=True)
class AlreadyExists:
    """A record with the same key is already stored."""
    entity: str
    username: str

    @property
    def message(self) -> str:
        return f"{self.entity} for user '{self.username}' already exists"


Outcome = Union[Ok[T], Forbidden, NotFound, AlreadyExists]
