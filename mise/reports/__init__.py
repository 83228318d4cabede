"""
Reports Module

Budget statistics and the plain-text exports built from per-project views.
"""

from mise.reports.budget import budget_by_category, budget_stats
from mise.reports.export import EXPORT_KINDS, export_text, format_money

__all__ = ['budget_stats', 'budget_by_category', 'export_text', 'format_money', 'EXPORT_KINDS']
