from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from sr_calculator.models import CalculatorInput

MIN_HORIZON_MONTHS = 12
MONTHLY_RATE_GUARDRAIL = 0.02
MAX_ANNUAL_RETURN_RATE = 0.30
MAX_ANNUAL_INFLATION_RATE = 0.15


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


def validate_inputs(data: CalculatorInput) -> ValidationResult:
    """Check calculator inputs against the hard rules and the soft guardrails.

    Every rule is evaluated so the caller gets the complete picture in one pass:
    errors block the calculation, warnings are advisory only.
    """
    errors: List[str] = []
    warnings: List[str] = []

    if data.currentAge <= 0:
        errors.append("Current age must be positive")

    if data.retirementAge <= data.currentAge:
        errors.append("Retirement age must be greater than current age")

    total_months = (data.retirementAge - data.currentAge) * 12
    if total_months < MIN_HORIZON_MONTHS:
        errors.append(f"Investment horizon must be at least {MIN_HORIZON_MONTHS} months")

    # annual rate typed in where a monthly one was expected shows up as a huge monthly rate
    if data.expectedAnnualReturnRate / 12 >= MONTHLY_RATE_GUARDRAIL:
        warnings.append(
            "Monthly return rate exceeds 2% guardrail - verify annual rate is correct (e.g., 0.12 for 12%)"
        )

    if not 0 <= data.expectedAnnualReturnRate <= MAX_ANNUAL_RETURN_RATE:
        warnings.append("Expected annual return rate should be between 0% and 30%")

    if not 0 <= data.annualInflationRate <= MAX_ANNUAL_INFLATION_RATE:
        warnings.append("Annual inflation rate should be between 0% and 15%")

    if data.monthlyContribution < 0:
        errors.append("Monthly contribution cannot be negative")

    if data.currentSavings < 0:
        errors.append("Current savings cannot be negative")

    return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)
