"""
Per-username locking for check-then-act sequences.

Service operations first check that a profile exists and then mutate a
store. Holding the username's lock across both steps keeps a concurrent
delete from slipping in between them.
"""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator, Dict


class UsernameLocks:
    """Registry of ``asyncio.Lock`` objects, one per username currently in use."""

    def __init__(self):
        self._locks: Dict[str, asyncio.Lock] = {}
        self._holders: Dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, username: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(username, asyncio.Lock())
        self._holders[username] = self._holders.get(username, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._holders[username] -= 1
            if self._holders[username] == 0:
                del self._holders[username]
                del self._locks[username]

    def __len__(self) -> int:
        return len(self._locks)
