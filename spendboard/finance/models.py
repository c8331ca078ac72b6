"""Mini README: Immutable finance values shared by sources and the dashboard.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * TransactionRecord - frozen dataclass for one financial event.
    * TotalsSummary - derived income, expense and balance figures.

Records arrive from a transaction source in the wire shape
``{"id", "amount", "category", "date", "type"}``. ``from_dict`` validates
that shape and ``as_dict`` exports it again for JSON responses. Dates are
kept as the strings the source supplied; nothing here orders or parses them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import math
from numbers import Real
from typing import Dict, Mapping, Union

TransactionId = Union[int, str]


class TransactionType(str, Enum):
    """Enumerate the supported transaction directions."""

    INCOME = "income"
    EXPENSE = "expense"

    @classmethod
    def from_str(cls, value: object) -> "TransactionType":
        """Coerce arbitrary casing into a valid transaction type."""

        if isinstance(value, cls):
            return value
        try:
            normalised = str(value).strip().lower()
            return cls(normalised)
        except ValueError as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error


@dataclass(frozen=True, slots=True)
class TransactionRecord:
    """Represent a single income or expense entry."""

    transaction_id: TransactionId
    amount: float
    category: str
    occurred_on: str
    transaction_type: TransactionType

    def __post_init__(self) -> None:
        if isinstance(self.transaction_id, bool) or not isinstance(self.transaction_id, (int, str)):
            raise ValueError("Transaction identifiers must be integers or strings.")
        if isinstance(self.amount, bool) or not isinstance(self.amount, Real):
            raise ValueError(f"Transaction {self.transaction_id} has a non-numeric amount.")
        if not math.isfinite(self.amount):
            raise ValueError(f"Transaction {self.transaction_id} has a non-finite amount.")
        if not isinstance(self.category, str) or not self.category.strip():
            raise ValueError(f"Transaction {self.transaction_id} requires a category.")
        if not isinstance(self.occurred_on, str):
            raise ValueError(f"Transaction {self.transaction_id} requires a date string.")
        object.__setattr__(
            self, "transaction_type", TransactionType.from_str(self.transaction_type)
        )

    @property
    def is_income(self) -> bool:
        return self.transaction_type is TransactionType.INCOME

    @classmethod
    def from_dict(cls, payload: Mapping[str, object]) -> "TransactionRecord":
        """Build a record from the source wire shape, raising ``ValueError`` when malformed."""

        if not isinstance(payload, Mapping):
            raise ValueError("Transaction payloads must be JSON objects.")
        missing = [key for key in ("id", "amount", "category", "date", "type") if key not in payload]
        if missing:
            raise ValueError(f"Transaction payload is missing fields: {', '.join(missing)}")
        return cls(
            transaction_id=payload["id"],  # type: ignore[arg-type]
            amount=payload["amount"],  # type: ignore[arg-type]
            category=payload["category"],  # type: ignore[arg-type]
            occurred_on=payload["date"],  # type: ignore[arg-type]
            transaction_type=payload["type"],  # type: ignore[arg-type]
        )

    def as_dict(self) -> Dict[str, object]:
        """Export the record in the source wire shape."""

        return {
            "id": self.transaction_id,
            "amount": self.amount,
            "category": self.category,
            "date": self.occurred_on,
            "type": self.transaction_type.value,
        }


@dataclass(frozen=True, slots=True)
class TotalsSummary:
    """Income, expenses and balance derived from a record collection."""

    income: float
    expenses: float
    balance: float

    @classmethod
    def empty(cls) -> "TotalsSummary":
        return cls(income=0, expenses=0, balance=0)

    def as_dict(self) -> Dict[str, float]:
        return {"income": self.income, "expenses": self.expenses, "balance": self.balance}
