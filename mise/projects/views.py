"""Per-project views over full entity collections.

Views are pure: they are recomputed from the latest collection on every call
and never mutate the collection they are given.
"""

from typing import Dict, Any, List, Optional, Iterable

from ..entity_store.registry import (
    SortKey,
    by_day_number,
    by_scene,
    by_scene_and_shot,
    by_sort_order,
)

def project_view(
    items: Iterable[Dict[str, Any]],
    project_id: Optional[str],
    sort_key: Optional[SortKey] = None
) -> List[Dict[str, Any]]:
    """Return the records whose ``projectId`` equals ``project_id``.

    Args:
        items: Full collection for one entity type
        project_id: Active project id, or None when nothing is selected
        sort_key: Optional natural ordering applied to the result

    Returns:
        A new list; empty when ``project_id`` is None or nothing matches
    """
    if project_id is None:
        return []
    matches = [item for item in items if item.get("projectId") == project_id]
    if sort_key is not None:
        matches.sort(key=sort_key)
    return matches

def project_shots(items, project_id):
    return project_view(items, project_id, by_scene_and_shot)

def project_continuity(items, project_id):
    return project_view(items, project_id, by_scene_and_shot)

def project_script_sides(items, project_id):
    return project_view(items, project_id, by_scene)

def project_schedule(items, project_id):
    return project_view(items, project_id, by_day_number)

def project_lookbook(items, project_id):
    return project_view(items, project_id, by_sort_order)

def project_budget(items, project_id):
    return project_view(items, project_id)
