"""Two-phase retirement projection.

Accumulation: monthly contributions (an ordinary annuity) and current savings
compound at the nominal expected return until the retirement date.

Withdrawal: the corpus is drawn down month by month by the inflation-adjusted
expense while growing at the real post-retirement return.
"""

from __future__ import annotations

import math
from typing import List

from sr_calculator.domain.validation import validate_inputs
from sr_calculator.models import CalculatorInput, CalculatorOutput

MAX_RETIREMENT_MONTHS = 1200  # 100 years
DEPLETION_RISK_YEARS = 10


def _compound(rate: float, periods: int) -> float:
    """(1 + rate)^periods, saturating to a signed infinity when out of float range."""
    base = 1 + rate
    try:
        return base ** periods
    except OverflowError:
        if base < 0 and periods % 2:
            return -math.inf
        return math.inf


def calculate_fv_sip(monthly_contribution: float, monthly_rate: float, total_months: int) -> float:
    """Future value of end-of-month contributions: PMT * ((1 + r)^n - 1) / r."""
    if monthly_rate == 0:
        return monthly_contribution * total_months

    growth_factor = _compound(monthly_rate, total_months)
    return monthly_contribution * ((growth_factor - 1) / monthly_rate)


def calculate_fv_current(current_savings: float, monthly_rate: float, total_months: int) -> float:
    """Lump sum compounded monthly: PV * (1 + r)^n."""
    return current_savings * _compound(monthly_rate, total_months)


def calculate_future_expense(current_monthly_expense: float, inflation_rate: float, years: int) -> float:
    # compounds yearly, not monthly
    return current_monthly_expense * _compound(inflation_rate, years)


def calculate_real_return(nominal_rate: float, inflation_rate: float) -> float:
    """Fisher relation: (1 + nominal) / (1 + inflation) - 1.

    Inflation of exactly -100% leaves a zero divisor; the ratio is then taken as
    a signed infinity, or NaN when the nominal growth factor is zero as well.
    """
    growth = 1 + nominal_rate
    deflator = 1 + inflation_rate
    if deflator == 0:
        if growth == 0:
            return math.nan
        return math.copysign(math.inf, growth)
    return growth / deflator - 1


def simulate_corpus_depletion(
    initial_corpus: float,
    monthly_withdrawal: float,
    monthly_real_return: float,
) -> int:
    """
    Count the months the corpus lasts.

    Each month growth is applied first, then the withdrawal is taken. The loop
    stops once the corpus is exhausted or after MAX_RETIREMENT_MONTHS, so a
    corpus that never runs out reports the cap.
    """
    corpus = initial_corpus
    months = 0

    while corpus > 0 and months < MAX_RETIREMENT_MONTHS:
        corpus = corpus * (1 + monthly_real_return)
        corpus = corpus - monthly_withdrawal
        months += 1

    return months


def perform_sanity_check(output: CalculatorOutput, data: CalculatorInput) -> List[str]:
    """
    Advisory checks on a finished projection.

    The corpus is compared against a rough estimate,
    contribution * months * (1 + rate * years / 2); anything above twice that is
    flagged. A corpus lasting under DEPLETION_RISK_YEARS is flagged as well.
    """
    warnings: List[str] = []

    simple_growth = 1 + data.expectedAnnualReturnRate * output.yearsToRetirement / 2
    expected_corpus = data.monthlyContribution * output.totalMonths * simple_growth

    if output.retirementCorpus > 2 * expected_corpus:
        warnings.append("Calculated corpus seems unusually high - please verify inputs")

    if output.retirementDurationYears < DEPLETION_RISK_YEARS:
        warnings.append(
            "Corpus depletion risk is high - consider increasing contributions or reducing expected expenses"
        )

    return warnings


def _invalid_output(messages: List[str]) -> CalculatorOutput:
    return CalculatorOutput(
        yearsToRetirement=0,
        totalMonths=0,
        monthlyReturnRate=0.0,
        fvSip=0.0,
        fvCurrent=0.0,
        retirementCorpus=0.0,
        futureMonthlyExpense=0.0,
        realPostRetReturn=0.0,
        retirementDurationMonths=0,
        retirementDurationYears=0.0,
        isValid=False,
        warnings=messages,
    )


def calculate_retirement(data: CalculatorInput) -> CalculatorOutput:
    """
    Run the full projection for one set of inputs.

    Invalid inputs produce an all-zero result with isValid=False; its warnings
    hold the validation errors followed by the validation warnings.
    """
    validation = validate_inputs(data)
    if not validation.is_valid:
        return _invalid_output([*validation.errors, *validation.warnings])

    # ---------- Accumulation ----------
    years_to_retirement = data.retirementAge - data.currentAge
    total_months = years_to_retirement * 12
    monthly_return_rate = data.expectedAnnualReturnRate / 12

    fv_sip = calculate_fv_sip(data.monthlyContribution, monthly_return_rate, total_months)
    fv_current = calculate_fv_current(data.currentSavings, monthly_return_rate, total_months)
    retirement_corpus = fv_sip + fv_current

    # ---------- Withdrawal ----------
    future_monthly_expense = calculate_future_expense(
        data.currentMonthlyExpense,
        data.annualInflationRate,
        years_to_retirement,
    )
    # real rate comes from the post-retirement nominal rate, not the accumulation one
    real_post_ret_return = calculate_real_return(
        data.postRetirementNominalReturnRate,
        data.annualInflationRate,
    )

    duration_months = simulate_corpus_depletion(
        retirement_corpus,
        future_monthly_expense,
        real_post_ret_return / 12,
    )

    output = CalculatorOutput(
        yearsToRetirement=years_to_retirement,
        totalMonths=total_months,
        monthlyReturnRate=monthly_return_rate,
        fvSip=fv_sip,
        fvCurrent=fv_current,
        retirementCorpus=retirement_corpus,
        futureMonthlyExpense=future_monthly_expense,
        realPostRetReturn=real_post_ret_return,
        retirementDurationMonths=duration_months,
        retirementDurationYears=duration_months / 12,
        isValid=True,
        warnings=list(validation.warnings),
    )

    sanity_warnings = perform_sanity_check(output, data)
    if not sanity_warnings:
        return output
    return output.model_copy(update={"warnings": [*output.warnings, *sanity_warnings]})


__all__ = [
    "MAX_RETIREMENT_MONTHS",
    "calculate_fv_sip",
    "calculate_fv_current",
    "calculate_future_expense",
    "calculate_real_return",
    "simulate_corpus_depletion",
    "perform_sanity_check",
    "calculate_retirement",
]
