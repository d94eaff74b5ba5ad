"""Mini README: Ledger and projection logic for Pennywise.

``ledger`` owns the persisted transaction list and its validation rules;
``projections`` derives the totals and chart series shown on the dashboard.
Neither module imports the web stack, so both are usable from the CLI and
tests without a running server.
"""

from .ledger import (
    Category,
    LedgerStore,
    Transaction,
    TransactionType,
    ValidationError,
)
from .projections import (
    CategoryBreakdown,
    ChartSeries,
    Projection,
    Summary,
    expense_by_category,
    filter_by_month,
    project,
    series_by_transaction,
    summarize,
)

__all__ = [
    "Category",
    "CategoryBreakdown",
    "ChartSeries",
    "LedgerStore",
    "Projection",
    "Summary",
    "Transaction",
    "TransactionType",
    "ValidationError",
    "expense_by_category",
    "filter_by_month",
    "project",
    "series_by_transaction",
    "summarize",
]
