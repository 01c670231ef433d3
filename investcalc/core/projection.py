from __future__ import annotations

from typing import List, Mapping, Optional

from investcalc.config import HORIZON_YEARS, WHAT_IF_EXTRAS
from investcalc.core.formatting import format_percent
from investcalc.core.stepping import level_policy, monthly_rate, run_years
from investcalc.schemas.projection import (
    CompoundGrowthResponse,
    GrowthBreakdown,
    ProjectionInput,
    ProjectionPoint,
    ProjectionResult,
    ProjectionSummary,
    WhatIfGain,
)


def to_series(balances: List[float]) -> List[ProjectionPoint]:
    return [ProjectionPoint(yearIndex=index, balance=balance) for index, balance in enumerate(balances)]


def project_compound_growth(
    principal: float,
    monthly_contribution: float,
    annual_rate_percent: float,
    years: int = HORIZON_YEARS,
) -> ProjectionResult:
    """
    Year-by-year balances for a level monthly contribution at a fixed rate.

    Order of operations (per month):
      1) Add the contribution.
      2) Earn interest on the new balance (balance * annual/100/12).

    The series starts with the principal at year 0, before any contribution,
    and has ``years + 1`` points. Negative rates shrink the balance the same way.
    """
    rate = monthly_rate(annual_rate_percent)
    balances, ledger = run_years(principal, years, level_policy(monthly_contribution, rate))

    return ProjectionResult(
        series=to_series(balances),
        summary=ProjectionSummary(
            finalValue=ledger.balance,
            totalContributed=ledger.contributed,
            totalInterestEarned=ledger.interest,
        ),
    )


def share_of_total(part: float, total: float) -> float:
    if total == 0:
        return 0.0
    return part / total * 100


def growth_breakdown(principal: float, summary: ProjectionSummary) -> GrowthBreakdown:
    total = summary.finalValue
    principal_share = share_of_total(principal, total)
    contribution_share = share_of_total(summary.totalContributed, total)
    interest_share = share_of_total(summary.totalInterestEarned, total)
    return GrowthBreakdown(
        principalShare=principal_share,
        contributionShare=contribution_share,
        interestShare=interest_share,
        principalLabel=format_percent(principal_share),
        contributionLabel=format_percent(contribution_share),
        interestLabel=format_percent(interest_share),
    )


def what_if_gains(
    inputs: ProjectionInput,
    base_final_value: float,
    extras: Optional[Mapping[str, float]] = None,
) -> List[WhatIfGain]:
    """How much more the final value would be with an extra monthly amount invested."""
    gains: List[WhatIfGain] = []
    for key, extra in (extras if extras is not None else WHAT_IF_EXTRAS).items():
        boosted = project_compound_growth(
            inputs.initialPrincipal,
            inputs.monthlyContribution + extra,
            inputs.annualRatePercent,
            inputs.horizonYears,
        )
        gains.append(
            WhatIfGain(
                key=key,
                extraMonthly=extra,
                additionalGrowth=boosted.summary.finalValue - base_final_value,
            )
        )
    return gains


def compound_growth_report(inputs: ProjectionInput) -> CompoundGrowthResponse:
    """Projection plus the breakdown and what-if figures shown alongside it."""
    result = project_compound_growth(
        inputs.initialPrincipal,
        inputs.monthlyContribution,
        inputs.annualRatePercent,
        inputs.horizonYears,
    )
    return CompoundGrowthResponse(
        series=result.series,
        summary=result.summary,
        breakdown=growth_breakdown(inputs.initialPrincipal, result.summary),
        whatIf=what_if_gains(inputs, result.summary.finalValue),
    )


__all__ = [
    "to_series",
    "project_compound_growth",
    "share_of_total",
    "growth_breakdown",
    "what_if_gains",
    "compound_growth_report",
]
