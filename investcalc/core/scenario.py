from __future__ import annotations

from typing import Tuple

from investcalc.config import HORIZON_YEARS
from investcalc.core.projection import to_series
from investcalc.core.stepping import monthly_rate, run_years
from investcalc.schemas.scenario import ScenarioInput, ScenarioResult


class ScenarioPolicy:
    """
    Monthly contribution that grows with income, and a rate that switches to
    the recession rate for years in [start, start + duration).

    Stateful: the contribution compounds on every call, so use one instance
    per run.
    """

    def __init__(
        self,
        monthly_contribution: float,
        base_annual_rate_percent: float,
        recession_return_percent: float,
        recession_start_year: int,
        recession_duration_years: int,
        income_growth_percent: float,
    ) -> None:
        self.contribution = float(monthly_contribution)
        self.base_rate = monthly_rate(base_annual_rate_percent)
        self.recession_rate = monthly_rate(recession_return_percent)
        self.income_growth = monthly_rate(income_growth_percent)
        self.recession_start = recession_start_year
        self.recession_end = recession_start_year + recession_duration_years

    def in_recession(self, year: int) -> bool:
        return self.recession_start <= year < self.recession_end

    def __call__(self, year: int, month: int) -> Tuple[float, float]:
        # grow first, then contribute the grown amount
        self.contribution *= 1 + self.income_growth
        rate = self.recession_rate if self.in_recession(year) else self.base_rate
        return self.contribution, rate


def simulate_scenario(
    principal: float,
    monthly_contribution: float,
    base_annual_rate_percent: float,
    inflation_rate_percent: float,
    recession_return_percent: float,
    recession_start_year: int,
    recession_duration_years: int,
    income_growth_percent: float,
    years: int = HORIZON_YEARS,
) -> ScenarioResult:
    """
    Nominal balances under a recession window and growing contributions.

    Years are counted from 1, so a window starting at year 10 affects the
    balance recorded as year 10 onwards. Inflation is carried through to the
    result untouched; balances are not deflated.
    """
    policy = ScenarioPolicy(
        monthly_contribution,
        base_annual_rate_percent,
        recession_return_percent,
        recession_start_year,
        recession_duration_years,
        income_growth_percent,
    )
    balances, ledger = run_years(principal, years, policy)

    return ScenarioResult(
        series=to_series(balances),
        finalValue=ledger.balance,
        totalContributed=ledger.contributed,
        inflationRatePercent=inflation_rate_percent,
    )


def run_scenario(inputs: ScenarioInput) -> ScenarioResult:
    return simulate_scenario(
        principal=inputs.initialPrincipal,
        monthly_contribution=inputs.monthlyContribution,
        base_annual_rate_percent=inputs.annualRatePercent,
        inflation_rate_percent=inputs.inflationRatePercent,
        recession_return_percent=inputs.recessionReturnPercent,
        recession_start_year=inputs.recessionStartYear,
        recession_duration_years=inputs.recessionDurationYears,
        income_growth_percent=inputs.incomeGrowthPercent,
        years=inputs.horizonYears,
    )


__all__ = ["ScenarioPolicy", "simulate_scenario", "run_scenario"]
