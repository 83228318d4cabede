import asyncio
import copy

from mise.projects import ProductionCoordinator, project_budget, project_continuity, project_lookbook, project_schedule, project_shots, project_view

SHOTS = [
    {"id": "a", "projectId": "1", "sceneNumber": 2, "shotNumber": "2B"},
    {"id": "b", "projectId": "2", "sceneNumber": 1, "shotNumber": "1A"},
    {"id": "c", "projectId": "1", "sceneNumber": 1, "shotNumber": "1B"},
    {"id": "d", "projectId": "1", "sceneNumber": 2, "shotNumber": "2A"},
    {"id": "e", "projectId": "1", "sceneNumber": 1, "shotNumber": "1A"},
]


def test_project_view_returns_exact_subset() -> None:
    assert [item["id"] for item in project_view(SHOTS, "1")] == ["a", "c", "d", "e"]
    assert [item["id"] for item in project_view(SHOTS, "2")] == ["b"]


def test_project_view_is_empty_for_unknown_or_missing_project() -> None:
    assert project_view(SHOTS, "nope") == []
    assert project_view(SHOTS, None) == []
    assert project_view([], "1") == []


def test_records_without_project_are_excluded() -> None:
    items = [{"id": "x"}, {"id": "y", "projectId": None}, {"id": "z", "projectId": "1"}]
    assert project_view(items, "1") == [{"id": "z", "projectId": "1"}]


def test_shots_sort_by_scene_then_shot() -> None:
    assert [item["id"] for item in project_shots(SHOTS, "1")] == ["e", "c", "d", "a"]


def test_views_do_not_mutate_input() -> None:
    items = copy.deepcopy(SHOTS)
    project_shots(items, "1")
    project_continuity(items, "1")
    assert items == SHOTS


def test_scene_numbers_sort_numerically() -> None:
    notes = [
        {"id": "n10", "projectId": "1", "sceneNumber": 10, "shotNumber": "10A"},
        {"id": "n2", "projectId": "1", "sceneNumber": 2, "shotNumber": "2A"},
        {"id": "n-missing", "projectId": "1", "shotNumber": "X"},
    ]
    assert [item["id"] for item in project_continuity(notes, "1")] == ["n-missing", "n2", "n10"]


def test_schedule_and_lookbook_orders() -> None:
    schedule = [
        {"id": "d3", "projectId": "1", "dayNumber": 3, "date": "2025-03-17"},
        {"id": "d1", "projectId": "1", "dayNumber": 1, "date": "2025-03-15"},
    ]
    lookbook = [
        {"id": "lb-b", "projectId": "1", "sortOrder": 1},
        {"id": "lb-a", "projectId": "1", "sortOrder": 0},
    ]
    assert [item["id"] for item in project_schedule(schedule, "1")] == ["d1", "d3"]
    assert [item["id"] for item in project_lookbook(lookbook, "1")] == ["lb-a", "lb-b"]


def test_updated_budget_line_stays_in_project_view(coordinator: ProductionCoordinator) -> None:
    line = {"id": "b-x", "projectId": "1", "category": "equipment", "estimated": 500, "actual": 0}

    async def scenario():
        store = coordinator.store("budget")
        await store.add(line)
        return await store.update(dict(line, actual=450))

    assert asyncio.run(scenario()) is True

    view = coordinator.project_items("budget", "1")
    assert dict(line, actual=450) in view
    assert [item["id"] for item in view].count("b-x") == 1
    assert project_budget(coordinator.store("budget").current_items(), "1") == view
