from __future__ import annotations

from math import isclose

import pytest

from investcalc.core.debt import (
    LoanState,
    amortize,
    compare_debt_vs_invest,
    invest_monthly,
    run_debt_comparison,
)
from investcalc.schemas.debt import DebtVsInvestRequest


def test_mortgage_with_extra_payment_pays_off_sooner_and_saves_interest():
    result = compare_debt_vs_invest(200000, 6, 1200, 300, 9)

    assert result.acceleratedMonths < result.baselineMonths
    assert result.baselineMonths == 360
    assert result.acceleratedMonths == 221
    assert result.interestSaved > 0
    assert isclose(result.debtPayoffYearsSaved, (360 - 221) / 12)
    assert result.yearsSavedLabel == "11.6 years"
    assert result.interestSaved == pytest.approx(result.baselineInterest - result.acceleratedInterest)


def test_investment_leg_runs_for_the_baseline_payoff_period():
    result = compare_debt_vs_invest(200000, 6, 1200, 300, 9)

    rate = 0.0075
    expected = 300 * (1 + rate) * ((1 + rate) ** 360 - 1) / rate
    assert isclose(result.investmentGrowth, expected, rel_tol=1e-9)


def test_amortizing_loan_clears_and_counts_each_month():
    loan = LoanState(balance=12000, annual_rate_percent=0, monthly_payment=1000)

    result = amortize(loan)

    assert result.months == 12
    assert result.totalInterest == 0
    assert result.paidOff
    assert loan.balance <= 0


def test_zero_rate_loan_years_saved():
    result = compare_debt_vs_invest(12000, 0, 1000, 1000, 9)

    assert result.baselineMonths == 12
    assert result.acceleratedMonths == 6
    assert result.debtPayoffYearsSaved == 0.5
    assert result.yearsSavedLabel == "0.5 years"
    assert result.interestSaved == 0


def test_accelerated_never_slower_when_baseline_amortizes():
    for extra in (1, 50, 300, 5000):
        result = compare_debt_vs_invest(150000, 4.5, 900, extra, 7)
        assert result.acceleratedMonths <= result.baselineMonths


def test_payment_below_interest_is_capped_at_360_months():
    # 6% on 200k is 1000 a month of interest; 900 never touches principal
    loan = LoanState(balance=200000, annual_rate_percent=6, monthly_payment=900)

    result = amortize(loan)

    assert result.months == 360
    assert not result.paidOff
    assert result.remainingBalance == 200000
    # the lump-sum tail covers (cap - months) = 0 remaining months
    assert result.totalInterest == 0


def test_balance_left_at_cap_stops_amortizing():
    loan = LoanState(balance=1000, annual_rate_percent=12, monthly_payment=100)

    result = amortize(loan, cap_months=3)

    assert result.months == 3
    assert not result.paidOff
    assert isclose(result.totalInterest, 10 + 9.1 + 8.191, rel_tol=1e-12)
    assert isclose(result.remainingBalance, 727.291, rel_tol=1e-12)


def test_interest_saved_can_be_negative_when_baseline_never_amortizes():
    result = compare_debt_vs_invest(200000, 6, 900, 300, 9)

    assert result.baselineMonths == 360
    assert result.acceleratedMonths == 360
    assert result.interestSaved < 0
    assert result.debtPayoffYearsSaved == 0


def test_zero_balance_loan_needs_no_months():
    result = compare_debt_vs_invest(0, 6, 1200, 300, 9)

    assert result.baselineMonths == 0
    assert result.acceleratedMonths == 0
    assert result.investmentGrowth == 0
    assert result.interestSaved == 0


def test_invest_monthly_contributes_before_compounding():
    assert invest_monthly(100, 0, 12) == pytest.approx(1200)
    assert isclose(invest_monthly(100, 12, 1), 101.0, rel_tol=1e-12)
    assert invest_monthly(100, 12, 0) == 0


def test_request_without_investment_rate_uses_the_default_rate():
    request = DebtVsInvestRequest(loanType="car-loan")

    default_rate = run_debt_comparison(request, 9)
    higher_rate = run_debt_comparison(request, 12)
    explicit = run_debt_comparison(request.model_copy(update={"investmentAnnualRatePercent": 12}), 9)

    assert default_rate.loanType == "car-loan"
    assert higher_rate.investmentGrowth > default_rate.investmentGrowth
    assert explicit.investmentGrowth == higher_rate.investmentGrowth
