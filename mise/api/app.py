"""HTTP surface over the production coordinator.

Screens talk to the stores through these routes instead of holding their
own copies of the collections.
"""

from typing import Dict, Any, List, Optional
from contextlib import asynccontextmanager
import logging

from fastapi import Body, FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from ..exceptions import BackendError, DuplicateRecordError, InvalidRecordError, UnknownEntityError, UnknownProjectError
from ..projects.coordinator import ProductionCoordinator
from ..reports.budget import budget_stats
from ..reports.export import export_text

logger = logging.getLogger(__name__)


class ProjectSelection(BaseModel):
    project_id: Optional[str] = None


class ImportRequest(BaseModel):
    records: List[Dict[str, Any]]
    method: str = "spreadsheet"
    file_name: Optional[str] = None


def create_app(coordinator: Optional[ProductionCoordinator] = None) -> FastAPI:
    """Build the API around ``coordinator``, loading it on startup."""
    coordinator = coordinator or ProductionCoordinator()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await coordinator.initialize()
        logger.info("Production coordinator ready")
        yield

    app = FastAPI(title="Mise", lifespan=lifespan)
    app.state.coordinator = coordinator

    def store_for(key: str):
        try:
            return coordinator.store(key)
        except UnknownEntityError:
            raise HTTPException(status_code=404, detail=f"Unknown entity type: {key}")

    @app.get("/entities")
    async def list_entities():
        return [config.to_payload() for config in coordinator.configs.values()]

    @app.get("/entities/{key}")
    async def list_records(key: str):
        return store_for(key).current_items()

    @app.get("/entities/{key}/project")
    async def list_project_records(key: str, project_id: Optional[str] = None):
        store_for(key)
        return coordinator.project_items(key, project_id)

    @app.post("/entities/{key}", status_code=201)
    async def add_record(key: str, record: Dict[str, Any] = Body(...)):
        store = store_for(key)
        try:
            return await store.add(record)
        except DuplicateRecordError as e:
            raise HTTPException(status_code=409, detail=str(e))
        except InvalidRecordError as e:
            raise HTTPException(status_code=422, detail=str(e))

    @app.put("/entities/{key}/{record_id}")
    async def update_record(key: str, record_id: str, record: Dict[str, Any] = Body(...)):
        store = store_for(key)
        if record.get("id", record_id) != record_id:
            raise HTTPException(status_code=422, detail="Record id does not match the path")
        record = {**record, "id": record_id}
        # A missing id is a no-op, matching DELETE
        if not await store.update(record):
            return {"updated": False, "record": None}
        return {"updated": True, "record": record}

    @app.delete("/entities/{key}/{record_id}")
    async def remove_record(key: str, record_id: str):
        removed = await store_for(key).remove(record_id)
        return {"removed": removed}

    @app.get("/active-project")
    async def get_active_project():
        return {"project_id": coordinator.active_project_id}

    @app.put("/active-project")
    async def select_active_project(selection: ProjectSelection):
        try:
            await coordinator.select_project(selection.project_id)
        except UnknownProjectError as e:
            raise HTTPException(status_code=404, detail=str(e))
        return {"project_id": coordinator.active_project_id}

    @app.delete("/projects/{project_id}")
    async def remove_project(project_id: str, cascade: bool = True):
        removed = await coordinator.remove_project(project_id, cascade=cascade)
        return {"removed": removed}

    @app.get("/projects/{project_id}/budget")
    async def project_budget_stats(project_id: str):
        return budget_stats(coordinator.project_items("budget", project_id))

    @app.get("/projects/{project_id}/export/{kind}", response_class=PlainTextResponse)
    async def export_project(project_id: str, kind: str):
        try:
            project = coordinator.get_project(project_id)
        except UnknownProjectError as e:
            raise HTTPException(status_code=404, detail=str(e))
        return export_text(
            kind,
            project,
            shots=coordinator.project_items("shots", project_id),
            schedule=coordinator.project_items("schedule", project_id),
            budget=coordinator.project_items("budget", project_id),
            wrap_reports=coordinator.project_items("wrap_reports", project_id),
        )

    @app.get("/onboarding")
    async def get_onboarding():
        return {"completed": await coordinator.onboarding.has_completed()}

    @app.put("/onboarding")
    async def complete_onboarding():
        try:
            await coordinator.onboarding.complete()
        except BackendError as e:
            raise HTTPException(status_code=503, detail=str(e))
        return {"completed": True}

    @app.delete("/onboarding")
    async def reset_onboarding():
        try:
            await coordinator.onboarding.reset()
        except BackendError as e:
            raise HTTPException(status_code=503, detail=str(e))
        return {"completed": False}

    @app.get("/imports")
    async def list_imports():
        return [batch.to_payload() for batch in await coordinator.import_history.get_history()]

    @app.post("/imports/undo")
    async def undo_import():
        batch = await coordinator.undo_last_import()
        if batch is None:
            raise HTTPException(status_code=404, detail="Nothing to undo")
        return batch.to_payload()

    @app.post("/imports/{key}", status_code=201)
    async def import_records(key: str, request: ImportRequest):
        store_for(key)
        try:
            batch = await coordinator.import_records(key, request.records, request.method, request.file_name)
        except DuplicateRecordError as e:
            raise HTTPException(status_code=409, detail=str(e))
        except (InvalidRecordError, ValueError) as e:
            raise HTTPException(status_code=422, detail=str(e))
        return batch.to_payload()

    return app
