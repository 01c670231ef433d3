"""Pay debt down faster, or invest the extra instead?"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from investcalc.config import DEFAULT_ANNUAL_RATE_PERCENT, LOAN_TERM_CAP_MONTHS, MONTHS_PER_YEAR
from investcalc.core.formatting import format_years
from investcalc.core.stepping import level_policy, monthly_rate, run_months
from investcalc.schemas.debt import AmortizationResult, DebtComparison, DebtVsInvestRequest

logger = logging.getLogger(__name__)


@dataclass
class LoanState:
    balance: float
    annual_rate_percent: float
    monthly_payment: float

    @property
    def monthly_rate(self) -> float:
        return monthly_rate(self.annual_rate_percent)


def amortize(loan: LoanState, cap_months: int = LOAN_TERM_CAP_MONTHS) -> AmortizationResult:
    """
    Pay ``loan`` down month by month until it clears or ``cap_months`` pass.

    A payment that does not cover the month's interest never clears the loan:
    the month count is pinned at the cap and the loop stops. A balance still
    left afterwards adds balance * rate * (cap - months) of interest in one go
    rather than amortizing the tail. ``loan`` is mutated in place.
    """
    rate = loan.monthly_rate
    total_interest = 0.0
    months = 0

    while loan.balance > 0 and months < cap_months:
        interest = loan.balance * rate
        principal = loan.monthly_payment - interest
        if principal <= 0:
            logger.debug(
                "payment %.2f does not cover interest %.2f; capping at %d months",
                loan.monthly_payment,
                interest,
                cap_months,
            )
            months = cap_months
            break
        loan.balance -= principal
        total_interest += interest
        months += 1

    if loan.balance > 0:
        total_interest += loan.balance * rate * (cap_months - months)

    return AmortizationResult(
        months=months,
        totalInterest=total_interest,
        remainingBalance=loan.balance,
        paidOff=loan.balance <= 0,
    )


def invest_monthly(amount: float, annual_rate_percent: float, months: int) -> float:
    """Value of investing ``amount`` every month for ``months`` months."""
    ledger = run_months(0.0, months, level_policy(amount, monthly_rate(annual_rate_percent)))
    return ledger.balance


def compare_debt_vs_invest(
    loan_balance: float,
    loan_annual_rate_percent: float,
    monthly_payment: float,
    extra_monthly_amount: float,
    investment_annual_rate_percent: float,
    cap_months: int = LOAN_TERM_CAP_MONTHS,
) -> DebtComparison:
    """
    Compare the regular payment against payment + extra, and against investing
    the extra for as long as the regular payment takes to clear the loan.
    """
    baseline = amortize(
        LoanState(loan_balance, loan_annual_rate_percent, monthly_payment),
        cap_months,
    )
    accelerated = amortize(
        LoanState(loan_balance, loan_annual_rate_percent, monthly_payment + extra_monthly_amount),
        cap_months,
    )
    years_saved = (baseline.months - accelerated.months) / MONTHS_PER_YEAR

    return DebtComparison(
        interestSaved=baseline.totalInterest - accelerated.totalInterest,
        investmentGrowth=invest_monthly(
            extra_monthly_amount, investment_annual_rate_percent, baseline.months
        ),
        debtPayoffYearsSaved=years_saved,
        yearsSavedLabel=format_years(years_saved),
        baselineMonths=baseline.months,
        acceleratedMonths=accelerated.months,
        baselineInterest=baseline.totalInterest,
        acceleratedInterest=accelerated.totalInterest,
    )


def run_debt_comparison(
    request: DebtVsInvestRequest,
    default_investment_rate_percent: float = DEFAULT_ANNUAL_RATE_PERCENT,
) -> DebtComparison:
    investment_rate = (
        request.investmentAnnualRatePercent
        if request.investmentAnnualRatePercent is not None
        else default_investment_rate_percent
    )
    comparison = compare_debt_vs_invest(
        loan_balance=request.loanBalance,
        loan_annual_rate_percent=request.loanAnnualRatePercent,
        monthly_payment=request.monthlyPayment,
        extra_monthly_amount=request.extraMonthlyAmount,
        investment_annual_rate_percent=investment_rate,
    )
    return comparison.model_copy(update={"loanType": request.loanType})


__all__ = [
    "LoanState",
    "amortize",
    "invest_monthly",
    "compare_debt_vs_invest",
    "run_debt_comparison",
]
