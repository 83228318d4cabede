from datetime import date

import pytest

from mise.entity_store.seeds import SAMPLE_BUDGET, SAMPLE_PROJECTS, SAMPLE_SCHEDULE, SAMPLE_SHOTS
from mise.reports import budget_by_category, budget_stats, export_text, format_money


def test_budget_stats_for_sample_budget() -> None:
    stats = budget_stats(SAMPLE_BUDGET)

    assert stats["total_estimated"] == 11100
    assert stats["total_actual"] == 6000
    assert stats["total_paid"] == 4800
    assert stats["remaining"] == 5100
    assert stats["spent_percent"] == pytest.approx(6000 / 11100 * 100)


def test_budget_stats_with_nothing_estimated() -> None:
    assert budget_stats([]) == {
        "total_estimated": 0.0,
        "total_actual": 0.0,
        "total_paid": 0.0,
        "remaining": 0.0,
        "spent_percent": 0.0,
    }


def test_spent_percent_is_capped() -> None:
    over = [{"id": "b", "category": "music", "estimated": 100, "actual": 250, "paid": True}]
    assert budget_stats(over)["spent_percent"] == 100.0


def test_budget_by_category_keeps_first_seen_order() -> None:
    items = SAMPLE_BUDGET + [{"id": "b-4", "category": "equipment", "estimated": 1000, "actual": 1500}]
    frame = budget_by_category(items)

    assert list(frame.index) == ["equipment", "locations", "catering"]
    assert frame.loc["equipment", "estimated"] == 6000
    assert frame.loc["equipment", "actual"] == 6300
    assert frame.loc["equipment", "variance"] == -300


def test_format_money() -> None:
    assert format_money(5000) == "$5,000"
    assert format_money(1234.5) == "$1,234.50"


def test_shot_list_export() -> None:
    text = export_text("shot-list", SAMPLE_PROJECTS[0], shots=SAMPLE_SHOTS, generated_on=date(2025, 3, 1))

    assert text.startswith("The Last Light\n")
    assert "Generated: 2025-03-01" in text
    assert text.index("SCENE 1") < text.index("SCENE 2")
    assert "  1B | medium | tracking | 35mm | PLANNED" in text
    assert "    Note: Car mount, driver side" in text
    assert text.endswith("Total: 3 shots | Approved: 0 | Remaining: 3")


def test_schedule_and_call_sheet_exports() -> None:
    schedule = export_text("schedule", SAMPLE_PROJECTS[0], schedule=SAMPLE_SCHEDULE)
    call_sheet = export_text("call-sheet", SAMPLE_PROJECTS[0], schedule=SAMPLE_SCHEDULE)
    empty_sheet = export_text("call-sheet", SAMPLE_PROJECTS[0], schedule=[])

    assert "DAY 1 - 2025-03-15" in schedule
    assert "Notes: Sunrise at 6:58 AM" in schedule
    assert "Day 1 - 2025-03-15" in call_sheet
    assert "Rosie's Diner" not in call_sheet
    assert empty_sheet.endswith("No schedule data available.\n")


def test_wrap_report_export_shows_overtime() -> None:
    report = {
        "id": "w-1", "projectId": "1", "dayNumber": 1, "date": "2025-03-15",
        "callTime": "5:30 AM", "actualWrap": "7:30 PM", "overtimeMinutes": 90,
        "shotsPlanned": 12, "shotsCompleted": 10, "totalTakes": 41, "circledTakes": 11,
        "scenesCompleted": "1, 2", "notes": "",
    }
    text = export_text("wrap-report", SAMPLE_PROJECTS[0], wrap_reports=[report])

    assert "Call: 5:30 AM | Wrap: 7:30 PM | OT: 1.5h" in text
    assert "Shots: 10/12 | Takes: 41 | Circled: 11" in text
    assert "Notes:" not in text



def test_wrap_report_export_coerces_stored_strings() -> None:
    reports = [
        {"id": "w-1", "projectId": "1", "dayNumber": 1, "overtimeMinutes": "30"},
        {"id": "w-2", "projectId": "1", "dayNumber": 2, "overtimeMinutes": "none"},
    ]
    text = export_text("wrap-report", SAMPLE_PROJECTS[0], wrap_reports=reports)

    assert "OT: 0.5h" in text
    assert text.count("OT:") == 1


def test_budget_summary_export() -> None:
    text = export_text("budget-summary", SAMPLE_PROJECTS[0], budget=SAMPLE_BUDGET)

    assert "EQUIPMENT\n  Estimated: $5,000 | Actual: $4,800 | Variance: $200" in text
    assert text.endswith("TOTAL Estimated: $11,100 | Actual: $6,000 | Remaining: $5,100")


def test_unknown_export_kind() -> None:
    assert export_text("storyboard", SAMPLE_PROJECTS[0]).endswith("Export type not supported.")
