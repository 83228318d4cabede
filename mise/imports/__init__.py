"""
Imports Module

Tracks spreadsheet and AI import batches so the latest one can be undone.
"""

from mise.imports.history import MAX_HISTORY, ImportBatch, ImportHistory

__all__ = ['ImportBatch', 'ImportHistory', 'MAX_HISTORY']
