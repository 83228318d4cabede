from typing import Optional, Callable, List
import json
import logging

from ..base_config import ACTIVE_PROJECT_KEY
from ..exceptions import BackendError
from ..storage.backends import KeyValueBackend

logger = logging.getLogger(__name__)

class ActiveProjectContext:
    """Process-wide selection of the project every view is scoped to.

    The selection is read through ``project_id`` and written only through
    ``select``. It is mirrored to the backend so a restart restores it.
    """

    def __init__(self, backend: KeyValueBackend, storage_key: str = ACTIVE_PROJECT_KEY):
        self.backend = backend
        self.storage_key = storage_key
        self._project_id: Optional[str] = None
        self._listeners: List[Callable[[Optional[str]], None]] = []

    @property
    def project_id(self) -> Optional[str]:
        return self._project_id

    async def load(self) -> Optional[str]:
        """Restore the persisted selection; None when absent or unreadable."""
        try:
            raw = await self.backend.get(self.storage_key)
            value = None if raw is None else json.loads(raw)
        except (BackendError, ValueError) as e:
            logger.error(f"Failed to restore active project: {str(e)}", exc_info=True)
            value = None

        if value is not None and not isinstance(value, str):
            logger.warning(f"Ignoring stored active project of type {type(value).__name__}")
            value = None

        self._project_id = value
        return value

    async def select(self, project_id: Optional[str]) -> None:
        """Make ``project_id`` the active project and persist it."""
        changed = project_id != self._project_id
        self._project_id = project_id
        try:
            if project_id is None:
                await self.backend.remove(self.storage_key)
            else:
                await self.backend.set(self.storage_key, json.dumps(project_id))
        except BackendError as e:
            logger.error(f"Failed to persist active project {project_id!r}: {str(e)}", exc_info=True)

        if changed:
            logger.info(f"Active project set to {project_id!r}")
            for listener in list(self._listeners):
                try:
                    listener(project_id)
                except Exception as e:
                    logger.error(f"Active project listener failed: {str(e)}", exc_info=True)

    def subscribe(self, listener: Callable[[Optional[str]], None]) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
