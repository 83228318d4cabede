from typing import Dict, Any, Iterable
import logging
import pandas as pd

logger = logging.getLogger(__name__)

BUDGET_COLUMNS = ["category", "estimated", "actual", "paid"]

def _budget_frame(items: Iterable[Dict[str, Any]]) -> pd.DataFrame:
    frame = pd.DataFrame(list(items), columns=BUDGET_COLUMNS)
    frame["category"] = frame["category"].fillna("other").astype(str)
    for column in ("estimated", "actual"):
        frame[column] = pd.to_numeric(frame[column], errors="coerce").fillna(0.0)
    frame["paid"] = frame["paid"].eq(True)
    return frame

def budget_stats(items: Iterable[Dict[str, Any]]) -> Dict[str, float]:
    """Totals shown on the budget screen for one project's budget lines."""
    frame = _budget_frame(items)
    total_estimated = float(frame["estimated"].sum())
    total_actual = float(frame["actual"].sum())
    total_paid = float(frame.loc[frame["paid"], "actual"].sum())
    spent_percent = min(100.0, total_actual / total_estimated * 100) if total_estimated > 0 else 0.0
    return {
        "total_estimated": total_estimated,
        "total_actual": total_actual,
        "total_paid": total_paid,
        "remaining": total_estimated - total_actual,
        "spent_percent": spent_percent,
    }

def budget_by_category(items: Iterable[Dict[str, Any]]) -> pd.DataFrame:
    """Estimated, actual and variance per category, in first-seen order."""
    frame = _budget_frame(items)
    grouped = frame.groupby("category", sort=False)[["estimated", "actual"]].sum()
    grouped["variance"] = grouped["estimated"] - grouped["actual"]
    logger.debug(f"Budget grouped into {len(grouped)} categories")
    return grouped
