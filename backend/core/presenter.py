"""Shape a projection result into what the results panel displays."""

from __future__ import annotations

from typing import List

from core.independence import ProjectionResult, round_currency
from schemas.projection import ProjectionResponse, SummaryCard, Verdict

ON_TRACK_MESSAGE = "Congratulations! You're on track to reach your goal."
OFF_TRACK_MESSAGE = "You may need to adjust your plan to reach your goal."


def format_currency(amount: float) -> str:
    """US dollars with no decimals, e.g. 1234567.8 -> "$1,234,568"."""
    rounded = round_currency(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,}"


def verdict_for(result: ProjectionResult) -> Verdict:
    return Verdict(
        onTrack=result.isOnTrack,
        message=ON_TRACK_MESSAGE if result.isOnTrack else OFF_TRACK_MESSAGE,
    )


def summary_cards(result: ProjectionResult) -> List[SummaryCard]:
    return [
        SummaryCard(label="FI Number (Your Goal)", value=format_currency(result.independenceTarget)),
        SummaryCard(label="Projected Savings at Retirement", value=format_currency(result.finalSavings)),
        SummaryCard(label="Annual Expenses at Retirement", value=format_currency(result.expensesAtRetirement)),
        # plain number, not currency
        SummaryCard(label="Years to Retirement", value=str(result.yearsToRetirement)),
    ]


def present(result: ProjectionResult) -> ProjectionResponse:
    return ProjectionResponse(
        verdict=verdict_for(result),
        summary=summary_cards(result),
        chart=list(result.trajectory),
        result=result,
    )
