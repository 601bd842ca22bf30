"""Request/response contracts for the projection endpoint."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.independence import Age, ProjectionInput, ProjectionResult, YearPoint

PERCENT = 100.0

DEFAULT_FORM_VALUES: Dict[str, float] = {
    "currentAge": 30,
    "retirementAge": 65,
    "annualSalary": 80000,
    "salaryGrowth": 3,
    "monthlyExpenses": 2500,
    "currentSavings": 50000,
    "investmentReturn": 7,
    "inflationRate": 2.5,
}


class ProjectionForm(BaseModel):
    """
    Raw calculator form as the UI submits it.

    Rates are entered in percent (3 means 3%). Values may arrive as numeric
    strings; blanks and non-numeric text are rejected per field.
    """

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    currentAge: Age = Field(description="Current age in years.")
    retirementAge: Age = Field(description="Target retirement age in years.")
    annualSalary: float = Field(description="Current gross annual salary.")
    salaryGrowth: float = Field(description="Annual salary growth, in percent.")
    monthlyExpenses: float = Field(description="Current monthly expenses.")
    currentSavings: float = Field(description="Current savings and investments.")
    investmentReturn: float = Field(description="Expected annual investment return, in percent.")
    inflationRate: float = Field(description="Expected annual inflation, in percent.")

    @field_validator("*", mode="before")
    @classmethod
    def _strip_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            value = value.strip()
            if not value:
                raise ValueError("a number is required")
        return value

    @classmethod
    def defaults(cls) -> "ProjectionForm":
        return cls.model_validate(DEFAULT_FORM_VALUES)

    def to_input(self) -> ProjectionInput:
        return ProjectionInput(
            currentAge=self.currentAge,
            retirementAge=self.retirementAge,
            annualSalary=self.annualSalary,
            salaryGrowthRate=self.salaryGrowth / PERCENT,
            monthlyExpenses=self.monthlyExpenses,
            currentSavings=self.currentSavings,
            investmentReturnRate=self.investmentReturn / PERCENT,
            inflationRate=self.inflationRate / PERCENT,
        )


class Verdict(BaseModel):
    onTrack: bool
    message: str


class SummaryCard(BaseModel):
    label: str
    value: str


class ProjectionResponse(BaseModel):
    """Everything the results panel renders for one submission."""

    verdict: Verdict
    summary: List[SummaryCard]
    chart: List[YearPoint]
    result: ProjectionResult


class HealthResponse(BaseModel):
    message: str
