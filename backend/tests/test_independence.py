from __future__ import annotations

import pytest
from pydantic import ValidationError

from core.independence import (
    INDEPENDENCE_MULTIPLIER,
    InvalidTimelineError,
    OUT_OF_RANGE_MESSAGE,
    ProjectionOutOfRangeError,
    ProjectionInput,
    YearPoint,
    project,
    round_currency,
)


def make_input(**overrides) -> ProjectionInput:
    values = {
        "currentAge": 30,
        "retirementAge": 31,
        "annualSalary": 80000.0,
        "salaryGrowthRate": 0.03,
        "monthlyExpenses": 2500.0,
        "currentSavings": 50000.0,
        "investmentReturnRate": 0.07,
        "inflationRate": 0.025,
    }
    values.update(overrides)
    return ProjectionInput(**values)


def test_single_year_example():
    result = project(make_input())

    assert result.expensesAtRetirement == pytest.approx(30750.0)
    assert result.independenceTarget == pytest.approx(768750.0)
    assert result.finalSavings == pytest.approx(107000.0)
    assert result.isOnTrack is False
    assert result.yearsToRetirement == 1
    assert result.trajectory == (YearPoint(age=31, savings=107000, goal=768750),)


def test_zero_horizon_keeps_current_savings():
    inputs = make_input(currentAge=25, retirementAge=25, currentSavings=12345.67)
    result = project(inputs)

    assert result.trajectory == ()
    assert result.yearsToRetirement == 0
    assert result.finalSavings == 12345.67
    # goal is computed against today's expenses
    assert result.expensesAtRetirement == 30000.0
    assert result.independenceTarget == 30000.0 * INDEPENDENCE_MULTIPLIER


def test_retirement_before_current_age_is_rejected():
    with pytest.raises(InvalidTimelineError) as excinfo:
        project(make_input(currentAge=40, retirementAge=39))

    assert "Retirement age must be greater than current age" in str(excinfo.value)
    assert excinfo.value.current_age == 40
    assert excinfo.value.retirement_age == 39


def test_goal_increases_with_inflation():
    targets = [
        project(make_input(retirementAge=40, inflationRate=rate)).independenceTarget
        for rate in (-0.01, 0.0, 0.01, 0.025, 0.05)
    ]

    assert all(lower < higher for lower, higher in zip(targets, targets[1:]))


def test_contribution_is_added_before_growth():
    inputs = make_input(
        annualSalary=61000.0,
        monthlyExpenses=3100.0,
        currentSavings=9876.5,
        investmentReturnRate=0.083,
    )
    result = project(inputs)

    expected = (9876.5 + (61000.0 - 12 * 3100.0)) * (1 + 0.083)
    assert result.finalSavings == expected


@pytest.mark.parametrize("current_age, retirement_age", [(30, 31), (30, 45), (18, 80), (50, 50)])
def test_trajectory_has_one_point_per_year(current_age, retirement_age):
    result = project(make_input(currentAge=current_age, retirementAge=retirement_age))

    assert len(result.trajectory) == retirement_age - current_age
    assert [point.age for point in result.trajectory] == list(range(current_age + 1, retirement_age + 1))


def test_goal_is_flat_across_trajectory():
    result = project(make_input(retirementAge=65))

    goals = {point.goal for point in result.trajectory}
    assert goals == {round_currency(result.independenceTarget)}


def test_salary_growth_only_affects_later_years():
    inputs = make_input(
        currentAge=40,
        retirementAge=42,
        annualSalary=100.0,
        salaryGrowthRate=0.1,
        monthlyExpenses=0.0,
        currentSavings=0.0,
        investmentReturnRate=0.0,
    )
    result = project(inputs)

    assert [point.savings for point in result.trajectory] == [100, 210]
    assert result.finalSavings == pytest.approx(210.0)


def test_shortfall_draws_savings_negative():
    inputs = make_input(
        currentAge=50,
        retirementAge=52,
        annualSalary=20000.0,
        salaryGrowthRate=0.0,
        monthlyExpenses=3000.0,
        currentSavings=10000.0,
        investmentReturnRate=0.0,
    )
    result = project(inputs)

    assert [point.savings for point in result.trajectory] == [-6000, -22000]
    assert result.finalSavings == -22000.0
    assert result.isOnTrack is False


def test_final_savings_keeps_full_precision():
    inputs = make_input(
        annualSalary=1200.0,
        monthlyExpenses=100.0,
        currentSavings=0.5,
        investmentReturnRate=0.0,
    )
    result = project(inputs)

    # halves round up in the chart, the verdict uses the raw value
    assert result.trajectory[0].savings == 1
    assert result.finalSavings == 0.5


def test_fractional_ages_truncate_year_count():
    result = project(make_input(currentAge=30.5, retirementAge=33.2))

    assert result.yearsToRetirement == 2
    assert [point.age for point in result.trajectory] == [31.5, 32.5]
    assert result.expensesAtRetirement == pytest.approx(30000.0 * 1.025**2)


def test_on_track_when_savings_reach_goal():
    inputs = make_input(
        currentAge=30,
        retirementAge=30,
        monthlyExpenses=1000.0,
        currentSavings=300000.0,
    )
    result = project(inputs)

    assert result.independenceTarget == 300000.0
    assert result.isOnTrack is True


def test_repeated_calls_are_identical():
    inputs = make_input(retirementAge=70, salaryGrowthRate=0.041, investmentReturnRate=0.0612)

    first = project(inputs)
    second = project(inputs)

    assert first == second
    assert first.model_dump() == second.model_dump()


def test_result_is_immutable():
    result = project(make_input())

    with pytest.raises(ValidationError):
        result.finalSavings = 1.0


@pytest.mark.parametrize("bad_value", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_inputs_are_rejected(bad_value):
    with pytest.raises(ValidationError):
        make_input(inflationRate=bad_value)


@pytest.mark.parametrize(
    "amount, expected",
    [(0.5, 1), (-0.5, 0), (2.5, 3), (1.4999, 1), (-1.6, -2), (-1.5, -1), (0.49999999999999994, 0)],
)
def test_round_currency_rounds_halves_up(amount, expected):
    assert round_currency(amount) == expected


@pytest.mark.parametrize("bad_value", [float("nan"), float("inf"), float("-inf")])
def test_round_currency_refuses_non_finite(bad_value):
    with pytest.raises(OverflowError):
        round_currency(bad_value)


def test_inflation_too_large_to_compound_is_reported():
    inputs = make_input(currentAge=0, retirementAge=120, inflationRate=500.0)

    with pytest.raises(ProjectionOutOfRangeError) as excinfo:
        project(inputs)

    assert str(excinfo.value) == OUT_OF_RANGE_MESSAGE
    assert isinstance(excinfo.value.__cause__, OverflowError)


def test_savings_past_float_range_are_reported():
    inputs = make_input(currentAge=30, retirementAge=60, currentSavings=1e300, investmentReturnRate=2.0)

    with pytest.raises(ProjectionOutOfRangeError):
        project(inputs)
