"""Mini README: Persisted finance ledger supporting income and expenses.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * Category - fixed set of categories offered by the entry form.
    * Transaction - immutable dataclass storing one ledger entry.
    * ValidationError - raised when an add request is rejected.
    * LedgerStore - ordered, newest-first collection written through to storage.

Amounts are stored signed: expenses as the negative absolute value, income
as the positive absolute value. The store never mutates a record after
creation; records are only prepended, removed by id, or cleared together.
Every mutation persists the full sequence under the ``transactions`` key.
"""

from __future__ import annotations

import json
import math
import time
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional, Union

from ..logging_utils import get_logger
from ..storage import KeyValueStorage, StorageError

LOGGER = get_logger(__name__)

TRANSACTIONS_KEY = "transactions"

AmountInput = Union[str, int, float, Decimal, None]
DateInput = Union[str, date, datetime, None]


class ValidationError(ValueError):
    """Raised when a transaction request fails validation."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class TransactionType(str, Enum):
    """Enumerate the supported transaction kinds."""

    INCOME = "Income"
    EXPENSE = "Expense"

    @classmethod
    def from_str(cls, value: Union[str, "TransactionType"]) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        if isinstance(value, cls):
            return value
        try:
            normalised = value.strip().lower()
        except AttributeError as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error
        for member in cls:
            if member.value.lower() == normalised:
                return member
        raise ValueError(f"Unsupported transaction type: {value}")


class Category(str, Enum):
    """Categories available when recording a transaction."""

    GENERAL = "General"
    SALARY = "Salary"
    FOOD = "Food"
    BILLS = "Bills"
    SHOPPING = "Shopping"
    ENTERTAINMENT = "Entertainment"
    TRANSPORT = "Transport"
    HEALTH = "Health"

    @classmethod
    def from_str(cls, value: Union[str, "Category", None]) -> "Category":
        """Resolve a category label, falling back to General when blank."""

        if isinstance(value, cls):
            return value
        if value is None or not str(value).strip():
            return cls.GENERAL
        normalised = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == normalised:
                return member
        raise ValueError(f"Unsupported category: {value}")


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent a single income or expense entry."""

    transaction_id: int
    description: str
    amount: float
    category: Category
    occurred_on: date

    @property
    def is_income(self) -> bool:
        return self.amount > 0

    @property
    def is_expense(self) -> bool:
        return self.amount < 0

    @property
    def kind(self) -> TransactionType:
        return TransactionType.EXPENSE if self.amount < 0 else TransactionType.INCOME

    def display_amount(self, currency_symbol: str = "$") -> str:
        """Format the amount with an explicit sign, e.g. ``-$5.00``."""

        sign = "-" if self.amount < 0 else "+"
        return f"{sign}{currency_symbol}{abs(self.amount):.2f}"

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction using the persisted field names."""

        return {
            "id": self.transaction_id,
            "description": self.description,
            "amount": self.amount,
            "category": self.category.value,
            "date": self.occurred_on.isoformat(),
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, object]) -> "Transaction":
        """Rebuild a persisted transaction.

        Entries written by the earlier single-page tracker stored the label
        under ``text``; it is accepted as the description.
        """

        if not isinstance(payload, dict):
            raise ValueError("Transaction payload must be an object.")
        try:
            raw_id = payload["id"]
            description = payload.get("description", payload.get("text"))
            amount = payload["amount"]
            occurred_on = payload["date"]
        except KeyError as error:
            raise ValueError(f"Transaction payload is missing {error}") from error
        if isinstance(raw_id, bool) or isinstance(amount, bool):
            raise ValueError("Transaction id and amount must be numeric.")
        try:
            transaction_id = int(raw_id)
            amount = float(amount)
        except OverflowError as error:
            raise ValueError(f"Transaction id or amount is out of range: {error}") from error
        if not math.isfinite(amount):
            raise ValueError("Transaction amount must be finite.")
        return cls(
            transaction_id=transaction_id,
            description=str(description or ""),
            amount=amount,
            category=Category.from_str(payload.get("category")),
            occurred_on=_parse_date(occurred_on),
        )


def _parse_date(value: object) -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip())
    raise ValueError("Dates must be provided as ISO strings or date/datetime instances.")


def _parse_amount(value: AmountInput) -> float:
    """Return the magnitude of a user supplied amount or raise ``ValidationError``."""

    if value is None or isinstance(value, bool):
        raise ValidationError("amount", "Amount is required.")
    if isinstance(value, str):
        if not value.strip():
            raise ValidationError("amount", "Amount is required.")
        try:
            parsed = float(value.strip())
        except ValueError as error:
            raise ValidationError("amount", f"Amount '{value}' is not a number.") from error
    else:
        try:
            parsed = float(value)
        except (TypeError, ValueError, OverflowError) as error:
            raise ValidationError("amount", f"Amount '{value}' is not a number.") from error
    if not math.isfinite(parsed) or parsed <= 0:
        raise ValidationError("amount", "Amount must be a positive number.")
    return parsed


class LedgerStore:
    """Own the ordered transaction list and persist it on every change."""

    def __init__(
        self,
        storage: KeyValueStorage,
        *,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._storage = storage
        self._clock = clock
        self._transactions: List[Transaction] = []
        self._last_id = 0

    def __iter__(self) -> Iterator[Transaction]:
        return iter(list(self._transactions))

    def __len__(self) -> int:
        return len(self._transactions)

    def load(self) -> List[Transaction]:
        """Read persisted transactions, substituting an empty ledger on failure."""

        raw = self._storage.get(TRANSACTIONS_KEY)
        transactions: List[Transaction] = []
        if raw is not None:
            try:
                payload = json.loads(raw)
                if not isinstance(payload, list):
                    raise ValueError("Persisted transactions must be a list.")
                transactions = [Transaction.from_dict(entry) for entry in payload]
                if len({t.transaction_id for t in transactions}) != len(transactions):
                    raise ValueError("Persisted transactions contain duplicate ids.")
            except (TypeError, ValueError, OverflowError) as error:
                LOGGER.warning("Discarding unreadable transactions payload: %s", error)
                transactions = []
        self._transactions = transactions
        self._last_id = max([self._last_id] + [t.transaction_id for t in transactions])
        LOGGER.debug("Ledger loaded with %s transactions", len(transactions))
        return self.list()

    def list(self) -> List[Transaction]:
        """Return a newest-first snapshot of the ledger."""

        return list(self._transactions)

    def get(self, transaction_id: int) -> Transaction:
        """Retrieve a transaction, raising informative errors when missing."""

        for transaction in self._transactions:
            if transaction.transaction_id == transaction_id:
                return transaction
        raise KeyError(f"Transaction {transaction_id} not found")

    def add(
        self,
        description: Optional[str],
        amount: AmountInput,
        category: Union[str, Category, None] = Category.GENERAL,
        occurred_on: DateInput = None,
        transaction_type: Union[str, TransactionType] = TransactionType.INCOME,
    ) -> Transaction:
        """Validate, normalise and prepend a new transaction."""

        if description is None or not str(description).strip():
            raise ValidationError("description", "Description is required.")
        magnitude = _parse_amount(amount)
        if occurred_on is None or (isinstance(occurred_on, str) and not occurred_on.strip()):
            raise ValidationError("date", "Date is required.")
        try:
            parsed_date = _parse_date(occurred_on)
        except ValueError as error:
            raise ValidationError("date", f"Date '{occurred_on}' is not a valid date.") from error
        try:
            parsed_category = Category.from_str(category)
        except ValueError as error:
            raise ValidationError("category", str(error)) from error
        try:
            kind = TransactionType.from_str(transaction_type)
        except ValueError as error:
            raise ValidationError("type", str(error)) from error

        signed = -magnitude if kind is TransactionType.EXPENSE else magnitude
        transaction = Transaction(
            transaction_id=self._next_id(),
            description=str(description).strip(),
            amount=signed,
            category=parsed_category,
            occurred_on=parsed_date,
        )
        self._transactions.insert(0, transaction)
        LOGGER.info(
            "Added %s transaction %s (%s %.2f)",
            kind.value.lower(),
            transaction.transaction_id,
            transaction.category.value,
            transaction.amount,
        )
        self._persist()
        return transaction

    def remove(self, transaction_id: int) -> bool:
        """Remove the matching transaction; unknown ids are ignored."""

        remaining = [t for t in self._transactions if t.transaction_id != transaction_id]
        removed = len(remaining) != len(self._transactions)
        self._transactions = remaining
        if removed:
            LOGGER.info("Removed transaction %s", transaction_id)
        else:
            LOGGER.debug("Remove ignored, transaction %s not present", transaction_id)
        self._persist()
        return removed

    def clear(self) -> None:
        """Drop every transaction and persist the empty ledger."""

        count = len(self._transactions)
        self._transactions = []
        LOGGER.info("Cleared ledger (%s transactions removed)", count)
        self._persist()

    def _next_id(self) -> int:
        """Issue a millisecond timestamp id, bumped to stay strictly increasing."""

        candidate = int(self._clock() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate

    def _persist(self) -> None:
        payload = json.dumps([transaction.as_dict() for transaction in self._transactions])
        try:
            self._storage.set(TRANSACTIONS_KEY, payload)
        except StorageError:
            LOGGER.exception("Failed to persist %s transactions", len(self._transactions))
            raise
