"""Import batch history.

Every spreadsheet or AI import records which ids it created so the most
recent batch can be undone. Only the latest ``MAX_HISTORY`` batches are
kept, most recent first.
"""

from typing import Dict, Any, List, Optional
from dataclasses import dataclass, field
from datetime import datetime, timezone
import json
import logging
import time
import uuid

from ..base_config import IMPORT_HISTORY_KEY
from ..exceptions import BackendError
from ..storage.backends import KeyValueBackend

logger = logging.getLogger(__name__)

MAX_HISTORY = 10
IMPORT_METHODS = ("spreadsheet", "ai")

@dataclass
class ImportBatch:
    id: str
    entity_key: str
    entity_label: str
    item_ids: List[Any]
    method: str
    timestamp: str
    file_name: Optional[str] = None
    count: int = field(default=0)

    def __post_init__(self):
        if self.method not in IMPORT_METHODS:
            raise ValueError(f"Import method must be one of {IMPORT_METHODS}, got {self.method!r}")
        self.item_ids = list(self.item_ids)
        self.count = len(self.item_ids)

    def to_payload(self) -> Dict[str, Any]:
        payload = {
            "id": self.id,
            "entityKey": self.entity_key,
            "entityLabel": self.entity_label,
            "itemIds": list(self.item_ids),
            "count": self.count,
            "method": self.method,
            "timestamp": self.timestamp,
        }
        if self.file_name:
            payload["fileName"] = self.file_name
        return payload

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ImportBatch":
        if not isinstance(payload, dict):
            raise ValueError("Import batch must be an object")
        if not isinstance(payload.get("itemIds", []), list):
            raise ValueError("Import batch itemIds must be a list")
        try:
            return cls(
                id=str(payload["id"]),
                entity_key=str(payload["entityKey"]),
                entity_label=str(payload.get("entityLabel", payload["entityKey"])),
                item_ids=list(payload.get("itemIds", [])),
                method=str(payload.get("method", "spreadsheet")),
                timestamp=str(payload.get("timestamp", "")),
                file_name=payload.get("fileName"),
            )
        except KeyError as e:
            raise ValueError(f"Import batch is missing {str(e)}") from e


class ImportHistory:
    def __init__(self, backend: KeyValueBackend, storage_key: str = IMPORT_HISTORY_KEY):
        self.backend = backend
        self.storage_key = storage_key

    async def get_history(self) -> List[ImportBatch]:
        """Return every recorded batch, most recent first."""
        try:
            raw = await self.backend.get(self.storage_key)
            if not raw:
                return []
            parsed = json.loads(raw)
            if not isinstance(parsed, list):
                return []
        except (BackendError, ValueError) as e:
            logger.error(f"Failed to read import history: {str(e)}", exc_info=True)
            return []

        history = []
        for item in parsed:
            try:
                history.append(ImportBatch.from_payload(item))
            except ValueError as e:
                logger.warning(f"Skipping malformed import batch: {str(e)}")
        return history

    async def get_last(self) -> Optional[ImportBatch]:
        history = await self.get_history()
        return history[0] if history else None

    async def record(
        self,
        entity_key: str,
        entity_label: str,
        item_ids: List[Any],
        method: str,
        file_name: Optional[str] = None
    ) -> ImportBatch:
        """Record a new batch at the front of the history."""
        batch = ImportBatch(
            id=f"batch-{int(time.time() * 1000)}-{uuid.uuid4().hex[:6]}",
            entity_key=entity_key,
            entity_label=entity_label,
            item_ids=item_ids,
            method=method,
            timestamp=datetime.now(timezone.utc).isoformat(),
            file_name=file_name,
        )
        history = await self.get_history()
        await self._save([batch] + history[:MAX_HISTORY - 1])
        logger.info(f"Recorded import batch {batch.id}: {batch.count} {entity_key} record(s) via {method}")
        return batch

    async def remove_batch(self, batch_id: str) -> None:
        history = await self.get_history()
        await self._save([batch for batch in history if batch.id != batch_id])

    async def clear(self) -> None:
        try:
            await self.backend.remove(self.storage_key)
        except BackendError as e:
            logger.error(f"Failed to clear import history: {str(e)}", exc_info=True)

    async def _save(self, history: List[ImportBatch]) -> None:
        try:
            await self.backend.set(
                self.storage_key,
                json.dumps([batch.to_payload() for batch in history])
            )
        except BackendError as e:
            logger.error(f"Failed to save import history: {str(e)}", exc_info=True)
