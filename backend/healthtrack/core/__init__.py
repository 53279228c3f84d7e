"""Core module - authorization policy, service outcomes and locking."""

from .outcomes import Ok, Forbidden, NotFound, AlreadyExists, Outcome
from .locks import UsernameLocks
from . import policy

__all__ = ['Ok', 'Forbidden', 'NotFound', 'AlreadyExists', 'Outcome', 'UsernameLocks', 'policy']
