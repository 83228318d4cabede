"""
Projects Module

This module scopes entity collections to the active project: the
process-wide project selection, the per-project views, and the
coordinator that owns every entity store and cascades project deletes.
"""

from mise.projects.active_project import ActiveProjectContext
from mise.projects.coordinator import ProductionCoordinator
from mise.projects.views import (
    project_budget,
    project_continuity,
    project_lookbook,
    project_schedule,
    project_script_sides,
    project_shots,
    project_view,
)

# Expose key classes at the module level
__all__ = [
    'ActiveProjectContext',
    'ProductionCoordinator',
    'project_view',
    'project_shots',
    'project_continuity',
    'project_script_sides',
    'project_schedule',
    'project_lookbook',
    'project_budget',
]
