from typing import Dict, Any, List, Optional, Iterable
import asyncio
import logging

from ..base_config import get_storage_config
from ..entity_store.registry import ENTITY_CONFIGS, EntityConfig
from ..entity_store.store import EntityStore
from ..exceptions import UnknownEntityError, UnknownProjectError
from ..imports.history import IMPORT_METHODS, ImportBatch, ImportHistory
from ..onboarding import OnboardingState
from ..storage.backends import FileBackend, KeyValueBackend
from .active_project import ActiveProjectContext
from .views import project_view

logger = logging.getLogger(__name__)

class ProductionCoordinator:
    """Owns one entity store per registered type over a shared backend."""

    def __init__(
        self,
        backend: Optional[KeyValueBackend] = None,
        configs: Iterable[EntityConfig] = ENTITY_CONFIGS
    ):
        logger.info("Initializing ProductionCoordinator")
        if backend is None:
            backend = FileBackend(get_storage_config()["storage_dir"])
        self.backend = backend
        self.configs: Dict[str, EntityConfig] = {config.key: config for config in configs}

        storage_keys = [config.storage_key for config in self.configs.values()]
        if len(set(storage_keys)) != len(storage_keys):
            raise ValueError("Entity stores must not share a storage key")

        self.stores: Dict[str, EntityStore] = {
            config.key: EntityStore(config.key, config.storage_key, config.seed, backend)
            for config in self.configs.values()
        }
        self.active_project = ActiveProjectContext(backend)
        self.import_history = ImportHistory(backend)
        self.onboarding = OnboardingState(backend)

    @property
    def is_loading(self) -> bool:
        return any(store.is_loading for store in self.stores.values())

    @property
    def active_project_id(self) -> Optional[str]:
        return self.active_project.project_id

    async def initialize(self) -> None:
        """Load every store and restore the active project."""
        logger.info(f"Loading {len(self.stores)} entity stores")
        await asyncio.gather(*(store.load() for store in self.stores.values()))

        selected = await self.active_project.load()
        if "projects" not in self.stores:
            return
        if selected is None or self.stores["projects"].get(selected) is None:
            projects = self.stores["projects"].current_items()
            fallback = projects[0]["id"] if projects else None
            if fallback != selected:
                logger.info(f"Active project {selected!r} unavailable, selecting {fallback!r}")
                await self.active_project.select(fallback)

    def store(self, key: str) -> EntityStore:
        config = self._config(key)
        return self.stores[config.key]

    def project_items(self, key: str, project_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """Return the per-project view of one entity type.

        Types that are not project scoped return their whole collection.
        """
        config = self._config(key)
        items = self.stores[key].current_items()
        if not config.project_scoped:
            return items
        if project_id is None:
            project_id = self.active_project_id
        return project_view(items, project_id, config.sort_key)

    def get_project(self, project_id: str) -> Dict[str, Any]:
        project = self.store("projects").get(project_id)
        if project is None:
            raise UnknownProjectError(f"No project with id {project_id!r}")
        return project

    async def select_project(self, project_id: Optional[str]) -> None:
        if project_id is not None:
            self.get_project(project_id)
        await self.active_project.select(project_id)

    async def remove_project(self, project_id: str, cascade: bool = True) -> Dict[str, int]:
        """Remove a project and, unless ``cascade`` is False, its records.

        Returns:
            Number of records removed per entity key
        """
        removed = {"projects": await self.store("projects").remove(project_id)}
        if cascade:
            dependent = [key for key, config in self.configs.items() if config.project_scoped]
            counts = await asyncio.gather(*(
                self.stores[key].remove_where(lambda item: item.get("projectId") == project_id)
                for key in dependent
            ))
            removed.update({key: count for key, count in zip(dependent, counts) if count})
            logger.info(f"Cascade delete of project {project_id!r} removed {sum(counts)} dependent record(s)")

        if self.active_project_id == project_id:
            await self.active_project.select(None)
        return removed

    async def import_records(
        self,
        key: str,
        records: List[Dict[str, Any]],
        method: str,
        file_name: Optional[str] = None
    ) -> ImportBatch:
        """Bulk add already-validated records and remember the batch."""
        config = self._config(key)
        if method not in IMPORT_METHODS:
            raise ValueError(f"Import method must be one of {IMPORT_METHODS}, got {method!r}")
        added = await self.stores[key].add_many(records)
        return await self.import_history.record(
            config.key,
            config.label,
            [record["id"] for record in added],
            method,
            file_name=file_name,
        )

    async def undo_last_import(self) -> Optional[ImportBatch]:
        """Remove every record created by the most recent import batch."""
        batch = await self.import_history.get_last()
        if batch is None:
            return None

        if batch.entity_key in self.stores:
            removed = await self.stores[batch.entity_key].remove_many(batch.item_ids)
            logger.info(f"Undid import {batch.id}: removed {removed} of {batch.count} record(s)")
        else:
            logger.warning(f"Import batch {batch.id} refers to unknown entity type {batch.entity_key!r}")

        await self.import_history.remove_batch(batch.id)
        return batch

    def _config(self, key: str) -> EntityConfig:
        try:
            return self.configs[key]
        except KeyError:
            raise UnknownEntityError(key) from None
