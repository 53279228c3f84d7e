"""
Local Filesystem Storage Implementation.
Stores documents as files under a base directory on the server.
"""

from pathlib import Path
from typing import Optional

import aiofiles

from .interface import StorageInterface, StorageError


class LocalStorage(StorageInterface):
    """Filesystem-backed document storage rooted at ``base_dir``."""

    def __init__(self, base_dir: str = "./data"):
        self.base_dir = Path(base_dir).resolve()
        self.base_dir.mkdir(parents=True, exist_ok=True)

    def _get_full_path(self, path: str) -> Path:
        """Resolve ``path`` inside the base directory."""
        full_path = (self.base_dir / path).resolve()

        # Path must stay within base_dir
        if full_path != self.base_dir and self.base_dir not in full_path.parents:
            raise ValueError(f"Invalid path: {path} - path traversal detected")

        return full_path

    async def save(self, path: str, content: bytes | str) -> None:
        full_path = self._get_full_path(path)
        try:
            full_path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, str):
                async with aiofiles.open(full_path, 'w', encoding='utf-8') as f:
                    await f.write(content)
            else:
                async with aiofiles.open(full_path, 'wb') as f:
                    await f.write(content)
        except OSError as e:
            raise StorageError(f"Error saving file {path}: {e}") from e

    async def load(self, path: str) -> Optional[bytes]:
        full_path = self._get_full_path(path)
        if not full_path.exists():
            return None
        try:
            async with aiofiles.open(full_path, 'rb') as f:
                return await f.read()
        except OSError as e:
            raise StorageError(f"Error loading file {path}: {e}") from e

    async def exists(self, path: str) -> bool:
        return self._get_full_path(path).exists()

    async def delete(self, path: str) -> bool:
        full_path = self._get_full_path(path)
        if not full_path.exists():
            return False
        try:
            full_path.unlink()
        except OSError as e:
            raise StorageError(f"Error deleting file {path}: {e}") from e
        return True
