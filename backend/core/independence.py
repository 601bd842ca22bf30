from __future__ import annotations

import math
from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict

# 25x annual expenses, i.e. the 4% withdrawal rule
INDEPENDENCE_MULTIPLIER = 25
MONTHS_PER_YEAR = 12

INVALID_TIMELINE_MESSAGE = "Retirement age must be greater than current age."

OUT_OF_RANGE_MESSAGE = (
    "The projection grows too large to calculate. Try smaller rates or amounts."
)

Age = Union[int, float]


class InvalidTimelineError(ValueError):
    """Raised when the retirement age comes before the current age."""

    def __init__(self, current_age: Age, retirement_age: Age):
        super().__init__(INVALID_TIMELINE_MESSAGE)
        self.current_age = current_age
        self.retirement_age = retirement_age


class ProjectionOutOfRangeError(ValueError):
    """Raised when an amount in the projection no longer fits in a float."""

    def __init__(self):
        super().__init__(OUT_OF_RANGE_MESSAGE)


class ProjectionInput(BaseModel):
    """Validated numeric inputs. Rates are fractions (0.03 means 3%)."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    currentAge: Age
    retirementAge: Age
    annualSalary: float
    salaryGrowthRate: float
    monthlyExpenses: float
    currentSavings: float
    investmentReturnRate: float
    inflationRate: float


class YearPoint(BaseModel):
    model_config = ConfigDict(frozen=True)

    age: Age
    savings: int
    goal: int


class ProjectionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    independenceTarget: float
    expensesAtRetirement: float
    finalSavings: float
    isOnTrack: bool
    yearsToRetirement: int
    trajectory: Tuple[YearPoint, ...] = ()


def round_currency(amount: float) -> int:
    """Nearest whole unit, halves rounded up (0.5 -> 1, -0.5 -> 0)."""
    if not math.isfinite(amount):
        raise OverflowError(f"cannot round {amount!r}")
    whole = math.floor(amount)
    # amount - whole is exact, unlike amount + 0.5
    return whole + 1 if amount - whole >= 0.5 else whole


def years_to_retirement(inputs: ProjectionInput) -> int:
    """Whole years between the two ages; fractional gaps truncate."""
    if inputs.retirementAge < inputs.currentAge:
        raise InvalidTimelineError(inputs.currentAge, inputs.retirementAge)
    return int(inputs.retirementAge - inputs.currentAge)


def project(inputs: ProjectionInput) -> ProjectionResult:
    """
    Project savings year by year up to retirement and compare them to the FI number.

    Order of operations (per year):
      1) Add this year's contribution (salary minus expenses, can be negative).
      2) Apply investment growth to the balance after the contribution.
      3) Grow the salary for next year.
      4) Record a rounded point for charting.

    Expenses are inflated to the retirement year once, up front, so the goal
    is the same at every point. Only the trajectory is rounded.

    Raises InvalidTimelineError for a negative horizon and
    ProjectionOutOfRangeError when any amount overflows.
    """
    n = years_to_retirement(inputs)
    try:
        return _simulate(inputs, n)
    except OverflowError as exc:
        raise ProjectionOutOfRangeError() from exc


def _simulate(inputs: ProjectionInput, n: int) -> ProjectionResult:
    # every amount passes through round_currency, which rejects inf/nan
    annual_expenses = inputs.monthlyExpenses * MONTHS_PER_YEAR
    expenses_at_retirement = annual_expenses * (1 + inputs.inflationRate) ** n
    target = expenses_at_retirement * INDEPENDENCE_MULTIPLIER
    goal = round_currency(target)

    savings = inputs.currentSavings
    salary = inputs.annualSalary

    points = []
    for i in range(n):
        contribution = salary - annual_expenses
        savings += contribution
        savings *= 1 + inputs.investmentReturnRate
        salary *= 1 + inputs.salaryGrowthRate

        points.append(
            YearPoint(age=inputs.currentAge + i + 1, savings=round_currency(savings), goal=goal)
        )

    return ProjectionResult(
        independenceTarget=target,
        expensesAtRetirement=expenses_at_retirement,
        finalSavings=savings,
        isOnTrack=savings >= target,
        yearsToRetirement=n,
        trajectory=tuple(points),
    )


__all__ = [
    "INDEPENDENCE_MULTIPLIER",
    "MONTHS_PER_YEAR",
    "INVALID_TIMELINE_MESSAGE",
    "OUT_OF_RANGE_MESSAGE",
    "InvalidTimelineError",
    "ProjectionOutOfRangeError",
    "ProjectionInput",
    "YearPoint",
    "ProjectionResult",
    "round_currency",
    "years_to_retirement",
    "project",
]
