"""
Expense modeling module for firecalc.

Purpose
-------
Models the annual spending that a lifetime projection must fund:

- Base expenses: the profile's everyday living costs, always active.
- ExpenseStream: a named, time-bounded recurring annual expense (childcare,
  elder care, a retirement hobby) layered on top of base expenses.
- ExpenseCategory: an independently toggleable group of streams
  (additional retirement expenses, kids expenses, parents care).

All amounts are entered in today's dollars. The total nominal expense at an
age is:

    E(age) = (base + Σ_{s active at age} s.amount) * (1 + inflation) ** (age - current_age)

Design principles
-----------------
- Frozen dataclasses for immutability
- Pure functions of their inputs; no side effects
- Total: a stream whose end age precedes its start age is never active
  (a UserWarning is emitted when it is built)

Example
-------
>>> from firecalc.expenses import ExpenseStream, total_expenses_for_age
>>> kid = ExpenseStream(id="kid1", name="Child 1", amount=10_000,
...                     start_age=30, end_age=48)
>>> total_expenses_for_age(40_000, 30, current_age=25,
...                        inflation_rate=0.03, streams=[kid])
57963.70...
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple

from .utils import check_non_negative, to_nominal

__all__ = [
    "ExpenseStream",
    "ExpenseCategory",
    "total_expenses_for_age",
]


# ---------------------------------------------------------------------------
# Expense Streams
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ExpenseStream:
    """
    Recurring annual expense active over an inclusive age window.

    Parameters
    ----------
    id : str
        Stable identifier (used to update/remove streams in a list).
    name : str
        Human-readable label for reports.
    amount : float
        Annual amount in today's dollars. Must be non-negative.
    start_age : int
        First age (inclusive) at which the expense is paid.
    end_age : Optional[int], default None
        Last age (inclusive) at which the expense is paid. None means the
        expense lasts indefinitely.

    Notes
    -----
    ``end_age < start_age`` is accepted but the stream is never active;
    a UserWarning flags it at construction. Ingestion layers
    (`firecalc.config`) reject such streams outright.

    Examples
    --------
    >>> care = ExpenseStream(id="p1", name="Parent 1", amount=12_000,
    ...                      start_age=55, end_age=65)
    >>> care.is_active(55), care.is_active(66)
    (True, False)
    """
    id: str
    name: str
    amount: float
    start_age: int
    end_age: Optional[int] = None

    def __post_init__(self) -> None:
        check_non_negative("amount", self.amount)
        if self.end_age is not None and self.end_age < self.start_age:
            warnings.warn(
                f"Expense stream '{self.name or self.id}' ends at age {self.end_age} "
                f"before it starts at age {self.start_age}. It will never be active.",
                UserWarning,
            )

    @property
    def is_valid(self) -> bool:
        """True unless the end age precedes the start age."""
        return self.end_age is None or self.end_age >= self.start_age

    @property
    def duration(self) -> Optional[int]:
        """Number of years paid, or None for an open-ended stream."""
        if self.end_age is None:
            return None
        return max(0, self.end_age - self.start_age + 1)

    def is_active(self, age: int) -> bool:
        """Return True if the expense is paid at *age*."""
        if age < self.start_age:
            return False
        return self.end_age is None or age <= self.end_age

    def nominal_amount(self, age: int, current_age: int, inflation_rate: float) -> float:
        """Nominal amount paid at *age* (0.0 when inactive)."""
        if not self.is_active(age):
            return 0.0
        return to_nominal(self.amount, inflation_rate, age - current_age)


@dataclass(frozen=True)
class ExpenseCategory:
    """
    Independently toggleable group of expense streams.

    A disabled category contributes nothing and reports no breakdown,
    whatever its streams say. Streams are kept as a tuple so the category
    stays hashable and immutable.

    Parameters
    ----------
    name : str
        Category key ("retirement", "kids", "parents_care").
    streams : Tuple[ExpenseStream, ...]
        Streams of the category (may be empty).
    enabled : bool, default True
        Whether the category participates in projections.
    """
    name: str
    streams: Tuple[ExpenseStream, ...] = field(default_factory=tuple)
    enabled: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "streams", tuple(self.streams))

    def nominal_total(self, age: int, current_age: int, inflation_rate: float) -> float:
        """Nominal total of the category at *age* (0.0 when disabled)."""
        if not self.enabled:
            return 0.0
        return total_expenses_for_age(0.0, age, current_age, inflation_rate, self.streams)

    def starting_at(self, age: int) -> Tuple[ExpenseStream, ...]:
        """Streams whose first paid year is *age* (empty when disabled)."""
        if not self.enabled:
            return ()
        return tuple(s for s in self.streams if s.start_age == age and s.is_valid)


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def total_expenses_for_age(
    base_expenses: float,
    age: int,
    current_age: int,
    inflation_rate: float,
    streams: Iterable[ExpenseStream] = (),
) -> float:
    """
    Total nominal expenses paid at *age*.

    Converts the base amount and every stream active at *age* from today's
    dollars to nominal dollars at ``years = age - current_age`` and sums
    them.

    Parameters
    ----------
    base_expenses : float
        Base annual expenses in today's dollars (0.0 to total streams only).
    age : int
        Target age.
    current_age : int
        Time origin: the age at which amounts are expressed in today's dollars.
    inflation_rate : float
        Annual inflation rate (decimal).
    streams : Iterable[ExpenseStream]
        Candidate streams; inactive or zero-amount streams contribute nothing.

    Returns
    -------
    float
        Nominal base + nominal active-stream contributions.
    """
    years = age - current_age
    total = to_nominal(base_expenses, inflation_rate, years)
    for stream in streams:
        total += stream.nominal_amount(age, current_age, inflation_rate)
    return total
