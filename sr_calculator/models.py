from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict


class CalculatorInput(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    currentAge: int
    retirementAge: int
    currentSavings: float
    monthlyContribution: float
    expectedAnnualReturnRate: float  # 0.12 for 12%
    currentMonthlyExpense: float
    annualInflationRate: float  # 0.06 for 6%
    postRetirementNominalReturnRate: float


class CalculatorOutput(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    yearsToRetirement: int
    totalMonths: int
    monthlyReturnRate: float

    # accumulation phase
    fvSip: float
    fvCurrent: float
    retirementCorpus: float

    # withdrawal phase
    futureMonthlyExpense: float
    realPostRetReturn: float
    retirementDurationMonths: int
    retirementDurationYears: float

    isValid: bool
    warnings: List[str] = []


INPUT_FIELDS = tuple(CalculatorInput.model_fields)
