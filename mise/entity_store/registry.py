"""Registry of every entity type the app stores.

Each entry names the store, its storage key, its first-run seed, whether
its records belong to a project, and the natural order project views use.
"""

from typing import Dict, Any, List, Optional, Callable, Tuple
from dataclasses import dataclass, field

from . import seeds
from ..exceptions import UnknownEntityError

SortKey = Callable[[Dict[str, Any]], Tuple]

def as_number(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0

def by_scene(record: Dict[str, Any]) -> Tuple:
    return (as_number(record.get("sceneNumber")),)

def by_scene_and_shot(record: Dict[str, Any]) -> Tuple:
    return (as_number(record.get("sceneNumber")), str(record.get("shotNumber", "")))

def by_scene_shot_and_take(record: Dict[str, Any]) -> Tuple:
    return by_scene_and_shot(record) + (as_number(record.get("takeNumber")),)

def by_day_number(record: Dict[str, Any]) -> Tuple:
    return (as_number(record.get("dayNumber")), str(record.get("date", "")))

def by_sort_order(record: Dict[str, Any]) -> Tuple:
    return (as_number(record.get("sortOrder")),)


@dataclass(frozen=True)
class EntityConfig:
    key: str
    label: str
    storage_key: str
    seed: List[Dict[str, Any]] = field(default_factory=list)
    project_scoped: bool = True
    sort_key: Optional[SortKey] = None

    def to_payload(self) -> Dict[str, Any]:
        return {
            "key": self.key,
            "label": self.label,
            "storage_key": self.storage_key,
            "project_scoped": self.project_scoped,
        }


ENTITY_CONFIGS: List[EntityConfig] = [
    EntityConfig("projects", "Projects", "mise_projects", seeds.SAMPLE_PROJECTS, project_scoped=False),
    EntityConfig("crew", "Crew Members", "mise_crew", seeds.SAMPLE_CREW, project_scoped=False),
    EntityConfig("shots", "Shots", "mise_shots", seeds.SAMPLE_SHOTS, sort_key=by_scene_and_shot),
    EntityConfig("schedule", "Schedule Days", "mise_schedule", seeds.SAMPLE_SCHEDULE, sort_key=by_day_number),
    EntityConfig("budget", "Budget Items", "mise_budget", seeds.SAMPLE_BUDGET),
    EntityConfig("locations", "Locations", "mise_locations"),
    EntityConfig("continuity", "Continuity Notes", "mise_continuity", seeds.SAMPLE_CONTINUITY, sort_key=by_scene_and_shot),
    EntityConfig("notes", "Production Notes", "mise_notes"),
    EntityConfig("takes", "Takes", "mise_takes", sort_key=by_scene_shot_and_take),
    EntityConfig("breakdowns", "Scene Breakdowns", "mise_breakdowns", sort_key=by_scene),
    EntityConfig("blocking_notes", "Blocking Notes", "mise_blocking_notes", sort_key=by_scene),
    EntityConfig("color_references", "Color References", "mise_color_references"),
    EntityConfig("festivals", "Festival Submissions", "mise_festivals"),
    EntityConfig("lookbook", "Lookbook", "mise_lookbook", seeds.SAMPLE_LOOKBOOK, sort_key=by_sort_order),
    EntityConfig("director_statements", "Director Statements", "mise_director_statements", seeds.SAMPLE_DIRECTOR_STATEMENTS),
    EntityConfig("selects", "Selects", "mise_selects", sort_key=by_scene),
    EntityConfig("mood_board", "Mood Board", "mise_mood_board"),
    EntityConfig("shot_references", "Shot References", "mise_shot_references", sort_key=by_scene),
    EntityConfig("time_entries", "Time Entries", "mise_time_entries"),
    EntityConfig("vfx", "VFX Shots", "mise_vfx", sort_key=by_scene_and_shot),
    EntityConfig("wrap_reports", "Wrap Reports", "mise_wrap_reports", sort_key=by_day_number),
    EntityConfig("messages", "Messages", "mise_messages"),
    EntityConfig("cast", "Cast", "mise_cast"),
    EntityConfig("script_sides", "Script Sides", "mise_script_sides", sort_key=by_scene),
]

ENTITY_REGISTRY: Dict[str, EntityConfig] = {config.key: config for config in ENTITY_CONFIGS}

def get_entity_config(key: str) -> EntityConfig:
    """Look up an entity type by key."""
    try:
        return ENTITY_REGISTRY[key]
    except KeyError:
        raise UnknownEntityError(key) from None
