import asyncio
import json

import pytest

from mise.imports import ImportBatch, ImportHistory
from mise.onboarding import ONBOARDING_VERSION, OnboardingState

from conftest import FlakyBackend


def test_record_and_remove_batches(backend: FlakyBackend) -> None:
    history = ImportHistory(backend)

    async def scenario():
        first = await history.record("crew", "Crew Members", ["a", "b"], "spreadsheet", file_name="crew.xlsx")
        second = await history.record("shots", "Shots", ["s"], "ai")
        listed = await history.get_history()
        await history.remove_batch(second.id)
        return first, second, listed, await history.get_last()

    first, second, listed, last = asyncio.run(scenario())

    assert [batch.id for batch in listed] == [second.id, first.id]
    assert first.id != second.id
    assert first.id.startswith("batch-")
    assert last == first


def test_batch_payload_round_trip() -> None:
    batch = ImportBatch(
        id="batch-1",
        entity_key="budget",
        entity_label="Budget Items",
        item_ids=["b-9"],
        method="ai",
        timestamp="2025-03-01T12:00:00+00:00",
    )
    payload = batch.to_payload()

    assert payload["entityKey"] == "budget"
    assert payload["count"] == 1
    assert "fileName" not in payload
    assert ImportBatch.from_payload(payload) == batch


def test_batch_rejects_unknown_method() -> None:
    with pytest.raises(ValueError):
        ImportBatch(id="batch-1", entity_key="crew", entity_label="Crew", item_ids=[], method="email", timestamp="")


def test_unreadable_history_is_empty() -> None:
    corrupt = FlakyBackend({"mise_import_history": "not json"})
    assert asyncio.run(ImportHistory(corrupt).get_history()) == []

    failing = FlakyBackend()
    failing.fail_reads = True
    assert asyncio.run(ImportHistory(failing).get_last()) is None


def test_clear_history(backend: FlakyBackend) -> None:
    history = ImportHistory(backend)

    async def scenario():
        await history.record("crew", "Crew Members", ["a"], "spreadsheet")
        await history.clear()
        return await history.get_history()

    assert asyncio.run(scenario()) == []


def test_onboarding_flag(backend: FlakyBackend) -> None:
    state = OnboardingState(backend)

    async def scenario():
        before = await state.has_completed()
        await state.complete()
        after = await state.has_completed()
        await state.reset()
        return before, after, await state.has_completed()

    assert asyncio.run(scenario()) == (False, True, False)


def test_onboarding_from_older_version_is_not_complete() -> None:
    backend = FlakyBackend({"mise_onboarding_complete": "0"})
    assert ONBOARDING_VERSION != "0"
    assert asyncio.run(OnboardingState(backend).has_completed()) is False

    backend.fail_reads = True
    assert asyncio.run(OnboardingState(backend).has_completed()) is False


def test_malformed_batches_are_skipped_not_discarded() -> None:
    good = ImportBatch(
        id="batch-2",
        entity_key="crew",
        entity_label="Crew Members",
        item_ids=["c-9"],
        method="spreadsheet",
        timestamp="2025-03-02T09:00:00+00:00",
    )
    stored = [
        {"id": "batch-3", "entityKey": "crew", "itemIds": ["c-10"], "method": "fax"},
        {"entityKey": "crew"},
        good.to_payload(),
    ]
    backend = FlakyBackend({"mise_import_history": json.dumps(stored)})
    history = ImportHistory(backend)

    async def scenario():
        listed = await history.get_history()
        await history.record("shots", "Shots", ["s-9"], "ai")
        return listed, await history.get_history()

    listed, after = asyncio.run(scenario())

    assert listed == [good]
    assert [batch.id for batch in after][1:] == ["batch-2"]


def test_numeric_item_ids_keep_their_type() -> None:
    batch = ImportBatch(
        id="batch-1",
        entity_key="crew",
        entity_label="Crew Members",
        item_ids=[101, "c-102"],
        method="ai",
        timestamp="",
    )
    restored = ImportBatch.from_payload(json.loads(json.dumps(batch.to_payload())))

    assert restored.item_ids == [101, "c-102"]
