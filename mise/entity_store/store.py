"""Generic load / mutate / persist / notify manager for one record collection.

One ``EntityStore`` exists per entity type. The whole collection is written
back under the store's storage key on every mutation; there is no partial
persistence. Mutations on the same store are serialized, so each one builds
on the collection the previous one left behind.
"""

from typing import Dict, Any, List, Optional, Callable, Iterable
import asyncio
import copy
import json
import logging

from ..exceptions import BackendError, DuplicateRecordError, InvalidRecordError
from ..storage.backends import KeyValueBackend

logger = logging.getLogger(__name__)

Record = Dict[str, Any]
Listener = Callable[[str], None]

class EntityStore:
    def __init__(
        self,
        name: str,
        storage_key: str,
        seed: Iterable[Record],
        backend: KeyValueBackend
    ):
        self.name = name
        self.storage_key = storage_key
        self.backend = backend
        self._seed: List[Record] = [_clone_record(record) for record in seed]
        self._items: List[Record] = []
        self._loading = True
        self._stale = False
        self._listeners: List[Listener] = []
        self._mutation_lock: Optional[asyncio.Lock] = None
        self.last_error: Optional[Exception] = None

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def is_loading(self) -> bool:
        return self._loading

    @property
    def is_stale(self) -> bool:
        return self._stale

    def current_items(self) -> List[Record]:
        """Return a copy of the most recently loaded or mutated collection.

        Records are copied too; edits only reach storage through ``update``.
        """
        return [_clone_record(record) for record in self._items]

    def get(self, record_id: str) -> Optional[Record]:
        """Return the first record with ``record_id``, if any."""
        for record in self._items:
            if record.get("id") == record_id:
                return _clone_record(record)
        return None

    async def load(self) -> List[Record]:
        """Load the collection, seeding the backend on first run.

        A read failure or a corrupt stored value falls back to the seed
        without writing it, so the next successful read still sees whatever
        the backend holds.
        """
        async with self._lock():
            try:
                raw = await self.backend.get(self.storage_key)
                items = None if raw is None else deserialize_collection(raw)
            except (BackendError, ValueError) as e:
                logger.error(f"Failed to load '{self.name}' from {self.storage_key}, using seed data: {str(e)}", exc_info=True)
                self.last_error = e
                items = self._seed_copy()
            else:
                if items is None:
                    logger.info(f"No stored data for '{self.name}', seeding {len(self._seed)} records")
                    items = self._seed_copy()
                    await self._persist(items)

            self._items = items
            self._loading = False
            self._stale = False
        self._notify()
        return self.current_items()

    async def refresh(self) -> List[Record]:
        """Re-read the collection from the backend without seeding."""
        try:
            raw = await self.backend.get(self.storage_key)
            if raw is not None:
                self._items = deserialize_collection(raw)
            self._stale = False
        except (BackendError, ValueError) as e:
            logger.error(f"Failed to refresh '{self.name}': {str(e)}", exc_info=True)
            self.last_error = e
        self._notify()
        return self.current_items()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    async def add(self, record: Record) -> Record:
        """Append ``record``; its id must not already be in the collection."""
        return (await self.add_many([record]))[0]

    async def add_many(self, records: Iterable[Record]) -> List[Record]:
        """Append several records with a single persist."""
        new_records = [_clone_record(_validate_record(record)) for record in records]
        async with self._lock():
            seen = {record.get("id") for record in self._items}
            for record in new_records:
                if record["id"] in seen:
                    raise DuplicateRecordError(self.name, record["id"])
                seen.add(record["id"])
            if not new_records:
                return []
            await self._commit(self._items + new_records)
        logger.info(f"Added {len(new_records)} record(s) to '{self.name}'")
        return [_clone_record(record) for record in new_records]

    async def update(self, record: Record) -> bool:
        """Replace the record sharing ``record['id']``.

        Returns False, without persisting, when no record has that id.
        """
        replacement = _clone_record(_validate_record(record))
        async with self._lock():
            if not any(item.get("id") == replacement["id"] for item in self._items):
                logger.debug(f"Update on '{self.name}' ignored, no record {replacement['id']!r}")
                return False
            await self._commit([
                replacement if item.get("id") == replacement["id"] else item
                for item in self._items
            ])
        return True

    async def remove(self, record_id: str) -> int:
        """Remove every record with ``record_id``; returns how many went."""
        return await self.remove_where(lambda item: item.get("id") == record_id)

    async def remove_many(self, record_ids: Iterable[str]) -> int:
        ids = set(record_ids)
        return await self.remove_where(lambda item: item.get("id") in ids)

    async def remove_where(self, predicate: Callable[[Record], bool]) -> int:
        async with self._lock():
            kept = [item for item in self._items if not predicate(item)]
            removed = len(self._items) - len(kept)
            if removed:
                await self._commit(kept)
        if removed:
            logger.info(f"Removed {removed} record(s) from '{self.name}'")
        return removed

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener(store_name)`` after every load and mutation."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self.name)
            except Exception as e:
                logger.error(f"Listener failed for '{self.name}': {str(e)}", exc_info=True)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _lock(self) -> asyncio.Lock:
        # Created on first use so the lock belongs to the running loop
        if self._mutation_lock is None:
            self._mutation_lock = asyncio.Lock()
        return self._mutation_lock

    async def _commit(self, new_items: List[Record]) -> None:
        # The in-memory view is not rolled back when the write fails
        self._items = new_items
        self._stale = True
        if await self._persist(new_items):
            await self.refresh()
        else:
            self._notify()

    async def _persist(self, items: List[Record]) -> bool:
        try:
            await self.backend.set(self.storage_key, serialize_collection(items))
        except BackendError as e:
            logger.error(f"Failed to persist '{self.name}' to {self.storage_key}: {str(e)}", exc_info=True)
            self.last_error = e
            return False
        self.last_error = None
        return True

    def _seed_copy(self) -> List[Record]:
        return [_clone_record(record) for record in self._seed]

    def __repr__(self) -> str:
        return f"EntityStore(name={self.name!r}, storage_key={self.storage_key!r}, items={len(self._items)})"


def serialize_collection(items: List[Record]) -> str:
    return json.dumps(items, ensure_ascii=False)


def deserialize_collection(raw: str) -> List[Record]:
    """Parse a stored collection.

    Raises:
        ValueError: If ``raw`` is not a JSON array of objects.
    """
    data = json.loads(raw)
    if not isinstance(data, list):
        raise ValueError("Stored collection must be a JSON array")
    for item in data:
        if not isinstance(item, dict):
            raise ValueError("Stored collection entries must be JSON objects")
    return data


def _validate_record(record: Record) -> Record:
    if not isinstance(record, dict):
        raise InvalidRecordError("Record must be a mapping")
    record_id = record.get("id")
    if record_id is None or record_id == "":
        raise InvalidRecordError("Record must carry a non-empty 'id'")
    if isinstance(record_id, bool) or not isinstance(record_id, (str, int)):
        raise InvalidRecordError(f"Record id must be a string or integer, got {type(record_id).__name__}")
    return record


def _clone_record(record: Record) -> Record:
    return copy.deepcopy(record)
