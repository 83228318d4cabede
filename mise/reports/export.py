"""Plain-text exports shared from the export screen."""

from typing import Dict, Any, List, Optional
from datetime import date
import logging

from ..entity_store.registry import as_number
from .budget import budget_by_category, budget_stats

logger = logging.getLogger(__name__)

DIVIDER = "─" * 40
EXPORT_KINDS = ("shot-list", "schedule", "call-sheet", "wrap-report", "budget-summary")

def format_money(value: float) -> str:
    if float(value).is_integer():
        return f"${int(value):,}"
    return f"${value:,.2f}"

def export_text(
    kind: str,
    project: Dict[str, Any],
    shots: Optional[List[Dict[str, Any]]] = None,
    schedule: Optional[List[Dict[str, Any]]] = None,
    budget: Optional[List[Dict[str, Any]]] = None,
    wrap_reports: Optional[List[Dict[str, Any]]] = None,
    generated_on: Optional[date] = None
) -> str:
    """Render one export for a project from its per-project views.

    Args:
        kind: One of EXPORT_KINDS
        project: The project record, used for the title line
        shots, schedule, budget, wrap_reports: Per-project views
        generated_on: Date printed on the shot list (defaults to today)

    Returns:
        The export text; unsupported kinds produce a short notice
    """
    text = f"{project.get('title', 'Untitled')}\n{DIVIDER}\n\n"

    if kind == "shot-list":
        text += _shot_list(shots or [], generated_on or date.today())
    elif kind == "schedule":
        text += _schedule(schedule or [])
    elif kind == "call-sheet":
        text += _call_sheet(schedule or [])
    elif kind == "wrap-report":
        text += _wrap_reports(wrap_reports or [])
    elif kind == "budget-summary":
        text += _budget_summary(budget or [])
    else:
        logger.warning(f"Unsupported export type requested: {kind}")
        text += "Export type not supported."

    return text

def _shot_list(shots: List[Dict[str, Any]], generated_on: date) -> str:
    text = f"SHOT LIST\nGenerated: {generated_on.isoformat()}\n\n"

    grouped: Dict[Any, List[Dict[str, Any]]] = {}
    for shot in shots:
        grouped.setdefault(shot.get("sceneNumber"), []).append(shot)

    for scene in sorted(grouped, key=as_number):
        text += f"SCENE {scene}\n"
        for shot in grouped[scene]:
            text += (
                f"  {shot.get('shotNumber', '')} | {shot.get('type', '')} | {shot.get('movement', '')}"
                f" | {shot.get('lens', '')} | {str(shot.get('status', '')).upper()}\n"
                f"    {shot.get('description', '')}\n"
            )
            if shot.get("notes"):
                text += f"    Note: {shot['notes']}\n"
            text += "\n"

    approved = sum(1 for shot in shots if shot.get("status") == "approved")
    text += f"\nTotal: {len(shots)} shots | Approved: {approved} | Remaining: {len(shots) - approved}"
    return text

def _schedule(schedule: List[Dict[str, Any]]) -> str:
    text = "SHOOTING SCHEDULE\n\n"
    for day in schedule:
        text += (
            f"DAY {day.get('dayNumber')} - {day.get('date', '')}\n"
            f"Location: {day.get('location', '')}\n"
            f"Scenes: {day.get('scenes', '')}\n"
            f"Call: {day.get('callTime', '')} | Wrap: {day.get('wrapTime', '')}\n"
        )
        if day.get("notes"):
            text += f"Notes: {day['notes']}\n"
        text += f"{DIVIDER}\n\n"
    return text

def _call_sheet(schedule: List[Dict[str, Any]]) -> str:
    text = "CALL SHEET\n\n"
    if not schedule:
        return text + "No schedule data available.\n"
    day = schedule[0]
    text += (
        f"Day {day.get('dayNumber')} - {day.get('date', '')}\n"
        f"Location: {day.get('location', '')}\n"
        f"Call: {day.get('callTime', '')} | Wrap: {day.get('wrapTime', '')}\n"
        f"Scenes: {day.get('scenes', '')}\n"
    )
    return text

def _wrap_reports(reports: List[Dict[str, Any]]) -> str:
    text = "WRAP REPORTS\n\n"
    for report in reports:
        overtime = as_number(report.get("overtimeMinutes"))
        text += f"DAY {report.get('dayNumber')} - {report.get('date', '')}\n"
        text += f"Call: {report.get('callTime', '')} | Wrap: {report.get('actualWrap', '')}"
        if overtime > 0:
            text += f" | OT: {overtime / 60:.1f}h"
        text += (
            f"\nShots: {report.get('shotsCompleted', 0)}/{report.get('shotsPlanned', 0)}"
            f" | Takes: {report.get('totalTakes', 0)} | Circled: {report.get('circledTakes', 0)}\n"
            f"Scenes completed: {report.get('scenesCompleted', '')}\n"
        )
        if report.get("notes"):
            text += f"Notes: {report['notes']}\n"
        text += f"{DIVIDER}\n\n"
    return text

def _budget_summary(budget: List[Dict[str, Any]]) -> str:
    text = "BUDGET SUMMARY\n\n"
    for category, row in budget_by_category(budget).iterrows():
        text += (
            f"{category.upper().replace('-', ' ')}\n"
            f"  Estimated: {format_money(row['estimated'])} | Actual: {format_money(row['actual'])}"
            f" | Variance: {format_money(row['variance'])}\n\n"
        )
    stats = budget_stats(budget)
    text += (
        f"{DIVIDER}\nTOTAL Estimated: {format_money(stats['total_estimated'])}"
        f" | Actual: {format_money(stats['total_actual'])}"
        f" | Remaining: {format_money(stats['remaining'])}"
    )
    return text
