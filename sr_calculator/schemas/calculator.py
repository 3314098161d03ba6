"""Data contracts for the calculate endpoint."""

from __future__ import annotations

import math
import re
from typing import Any, List

from pydantic import BaseModel, ConfigDict, field_serializer, field_validator

from sr_calculator.models import INPUT_FIELDS, CalculatorInput, CalculatorOutput

# same grammar a browser applies to numeric form fields: no underscores, no "inf"/"nan"
_DECIMAL_RE = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_PREFIXED_INT_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def _to_float(number: Any) -> float:
    try:
        return float(number)
    except OverflowError:
        # integers wider than a double
        return math.inf if number > 0 else -math.inf


def _parse_text(text: str) -> float:
    text = text.strip()
    if not text:
        return 0.0
    if _DECIMAL_RE.fullmatch(text):
        return float(text.replace("Infinity", "inf"))
    if _PREFIXED_INT_RE.fullmatch(text):
        return _to_float(int(text, 0))
    return math.nan


def coerce_number(value: Any) -> float:
    """Loose numeric coercion for form-style payloads: anything unusable becomes 0."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        number = _to_float(value)
    elif isinstance(value, str):
        number = _parse_text(value)
    elif isinstance(value, list):
        # a one-element list reads as its element, as when it is joined into text
        if len(value) > 1 or (value and isinstance(value[0], (bool, dict))):
            return 0.0
        return coerce_number(value[0] if value else None)
    else:
        return 0.0
    return 0.0 if math.isnan(number) else number


def finite_or_none(value: Any) -> Any:
    """JSON has no infinity or NaN; such figures go out as null."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return value
class CalculateRequest(BaseModel):
    """Raw calculator payload; missing fields default to 0."""

    model_config = ConfigDict(extra="ignore")

    currentAge: int = 0
    retirementAge: int = 0
    currentSavings: float = 0.0
    monthlyContribution: float = 0.0
    expectedAnnualReturnRate: float = 0.0
    currentMonthlyExpense: float = 0.0
    annualInflationRate: float = 0.0
    postRetirementNominalReturnRate: float = 0.0

    @field_validator(*INPUT_FIELDS, mode="before")
    @classmethod
    def _coerce(cls, value: Any) -> float:
        return coerce_number(value)

    def to_input(self) -> CalculatorInput:
        return CalculatorInput.model_validate(self.model_dump())


class CalculationOutput(BaseModel):
    """Projection figures returned to clients (isValid is implied by success)."""

    yearsToRetirement: int
    totalMonths: int
    retirementCorpus: float
    fvSip: float
    fvCurrent: float
    futureMonthlyExpense: float
    retirementDurationYears: float
    retirementDurationMonths: int
    realPostRetReturn: float

    @classmethod
    def from_result(cls, result: CalculatorOutput) -> "CalculationOutput":
        return cls.model_validate(result.model_dump(include=set(cls.model_fields)))

    @field_serializer("*")
    def _json_number(self, value: Any) -> Any:
        return finite_or_none(value)


class CalculationInput(CalculatorInput):
    """Echo of the coerced input."""

    @field_serializer("*")
    def _json_number(self, value: Any) -> Any:
        return finite_or_none(value)


class CalculationData(BaseModel):
    input: CalculationInput
    output: CalculationOutput
    warnings: List[str]


class CalculateResponse(BaseModel):
    success: bool = True
    data: CalculationData


class ValidationFailure(BaseModel):
    error: str = "Validation failed"
    details: List[str]
    warnings: List[str]


class ApiDescription(BaseModel):
    message: str = "SR Calculator API"
    endpoint: str = "/api/calculate"
    method: str = "POST"
    requiredFields: List[str] = list(INPUT_FIELDS)
