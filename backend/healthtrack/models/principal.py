"""
Principal Model - The authenticated identity behind a request.
"""

from typing import FrozenSet
from pydantic import BaseModel, Field


class Principal(BaseModel):
    """Caller identity extracted from a verified bearer token."""
    username: str
    roles: FrozenSet[str] = Field(default_factory=frozenset)

    class Config:
        frozen = True

    def has_role(self, role: str) -> bool:
        return role in self.roles
