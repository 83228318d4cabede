"""Key-value persistence backends.

The entity store only ever talks to a backend through four coroutines:
``get``, ``set``, ``remove`` and ``keys``. Values are already-serialized
strings; backends never parse them.
"""

from typing import Dict, List, Optional
from abc import ABC, abstractmethod
import asyncio
import functools
import logging
import os
import tempfile

from ..exceptions import BackendError

logger = logging.getLogger(__name__)

class KeyValueBackend(ABC):
    """Interface describing how serialized values are persisted."""

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the value stored under ``key`` or ``None`` when absent.

        Raises:
            BackendError: If the backend cannot be read.
        """

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Remove ``key`` if it exists."""

    @abstractmethod
    async def keys(self) -> List[str]:
        """Return every stored key, sorted."""


class InMemoryBackend(KeyValueBackend):
    """Keep values in local process memory."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._values: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        return self._values.get(validate_key(key))

    async def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("value must be a serialized string")
        self._values[validate_key(key)] = value

    async def remove(self, key: str) -> None:
        self._values.pop(validate_key(key), None)

    async def keys(self) -> List[str]:
        return sorted(self._values)


class FileBackend(KeyValueBackend):
    """Persist each key as a ``<key>.json`` file inside ``storage_dir``."""

    def __init__(self, storage_dir: str):
        self.storage_dir = storage_dir
        os.makedirs(self.storage_dir, exist_ok=True)
        logger.info(f"File backend using storage directory: {self.storage_dir}")

    async def get(self, key: str) -> Optional[str]:
        return await self._run(self._read, self._path(key))

    async def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError("value must be a serialized string")
        await self._run(self._write, self._path(key), value)

    async def remove(self, key: str) -> None:
        await self._run(self._unlink, self._path(key))

    async def keys(self) -> List[str]:
        return await self._run(self._list)

    def _path(self, key: str) -> str:
        return os.path.join(self.storage_dir, f"{validate_key(key)}.json")

    async def _run(self, func, *args):
        loop = asyncio.get_running_loop()
        try:
            return await loop.run_in_executor(None, functools.partial(func, *args))
        except OSError as e:
            raise BackendError(f"Storage I/O failed: {str(e)}") from e

    @staticmethod
    def _read(path: str) -> Optional[str]:
        if not os.path.exists(path):
            return None
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()

    @staticmethod
    def _write(path: str, value: str) -> None:
        # Readers never see a partially written file
        parent = os.path.dirname(path)
        fd, tmp_path = tempfile.mkstemp(dir=parent, suffix=".tmp")
        try:
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(value)
            os.replace(tmp_path, path)
        except BaseException:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise

    @staticmethod
    def _unlink(path: str) -> None:
        if os.path.exists(path):
            os.remove(path)

    def _list(self) -> List[str]:
        return sorted(
            name[:-len(".json")]
            for name in os.listdir(self.storage_dir)
            if name.endswith(".json") and os.path.isfile(os.path.join(self.storage_dir, name))
        )


def validate_key(key: str) -> str:
    """Return ``key`` if it is usable as a storage key."""
    if not isinstance(key, str):
        raise TypeError("key must be a string")
    stripped = key.strip()
    if not stripped:
        raise ValueError("key must be a non-empty string")
    if "/" in stripped or "\\" in stripped or stripped.startswith("."):
        raise ValueError(f"Invalid storage key: {key!r}")
    return stripped
