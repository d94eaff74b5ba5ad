"""Mini README: Derived views over the ledger.

Structure:
    * filter_by_month - restrict records to one calendar month.
    * summarize - income, expense and balance totals.
    * series_by_transaction - per-record bar chart series.
    * expense_by_category - pie chart totals grouped by category.
    * project - bundle of all of the above for the rendering surface.

Everything here is a pure function of ``(records, month)``. The interface
re-runs ``project`` after every mutation instead of caching results.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence

from ..utils.months import parse_month
from .ledger import Transaction

LABEL_LENGTH = 12


@dataclass(slots=True)
class Summary:
    """Totals displayed on the summary cards."""

    income: float = 0.0
    expenses: float = 0.0
    balance: float = 0.0

    @property
    def is_positive(self) -> bool:
        return self.balance >= 0

    def as_dict(self) -> Dict[str, float]:
        return {"income": self.income, "expenses": self.expenses, "balance": self.balance}


@dataclass(slots=True)
class ChartSeries:
    """Bar chart data: one label and one value per bucket for every record."""

    labels: List[str] = field(default_factory=list)
    income: List[float] = field(default_factory=list)
    expenses: List[float] = field(default_factory=list)

    def as_dict(self) -> Dict[str, List]:
        return {"labels": self.labels, "income": self.income, "expenses": self.expenses}


@dataclass(slots=True)
class CategoryBreakdown:
    """Pie chart data: absolute expense totals per category."""

    labels: List[str] = field(default_factory=list)
    totals: List[float] = field(default_factory=list)

    def as_dict(self) -> Dict[str, List]:
        return {"labels": self.labels, "totals": self.totals}


@dataclass(slots=True)
class Projection:
    """Everything the dashboard needs for one render."""

    month: str
    records: List[Transaction]
    summary: Summary
    series: ChartSeries
    categories: CategoryBreakdown

    def as_dict(self) -> Dict[str, object]:
        return {
            "month": self.month,
            "summary": self.summary.as_dict(),
            "series": self.series.as_dict(),
            "categories": self.categories.as_dict(),
            "transactions": [record.as_dict() for record in self.records],
        }


def filter_by_month(records: Iterable[Transaction], month: str) -> List[Transaction]:
    """Return records dated within ``month`` (``YYYY-MM``); blank keeps everything.

    Dates are compared by parsed year and month rather than string prefix.
    """

    if not month:
        return list(records)
    year, month_number = parse_month(month)
    return [
        record
        for record in records
        if record.occurred_on.year == year and record.occurred_on.month == month_number
    ]


def summarize(records: Iterable[Transaction]) -> Summary:
    """Sum positive amounts as income and negative amounts as expenses."""

    income = 0.0
    expenses = 0.0
    for record in records:
        if record.is_income:
            income += record.amount
        elif record.is_expense:
            expenses += record.amount
    return Summary(income=income, expenses=expenses, balance=income + expenses)


def _label_for(record: Transaction, index: int) -> str:
    if record.description:
        return record.description[:LABEL_LENGTH]
    return f"#{index + 1}"


def series_by_transaction(records: Sequence[Transaction]) -> ChartSeries:
    """Split every record into an income bucket and an expense bucket."""

    series = ChartSeries()
    for index, record in enumerate(records):
        series.labels.append(_label_for(record, index))
        series.income.append(record.amount if record.is_income else 0.0)
        series.expenses.append(abs(record.amount) if record.is_expense else 0.0)
    return series


def expense_by_category(records: Iterable[Transaction]) -> CategoryBreakdown:
    """Group expenses by category in first-seen order, summing absolute values."""

    totals: Dict[str, float] = {}
    for record in records:
        if not record.is_expense:
            continue
        label = record.category.value
        totals[label] = totals.get(label, 0.0) + abs(record.amount)
    return CategoryBreakdown(labels=list(totals.keys()), totals=list(totals.values()))


def project(records: Iterable[Transaction], month: str = "") -> Projection:
    """Run every projection over the month-filtered records."""

    filtered = filter_by_month(records, month)
    return Projection(
        month=month,
        records=filtered,
        summary=summarize(filtered),
        series=series_by_transaction(filtered),
        categories=expense_by_category(filtered),
    )
