"""Data contracts for the debt-vs-invest comparison."""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from investcalc.config import (
    DEFAULT_EXTRA_AMOUNT,
    DEFAULT_LOAN_BALANCE,
    DEFAULT_LOAN_PAYMENT,
    DEFAULT_LOAN_RATE_PERCENT,
    MAX_AMOUNT,
)

LoanType = Literal["mortgage", "car-loan", "student-loan", "other"]


class DebtVsInvestRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    loanType: LoanType = "mortgage"
    loanBalance: float = Field(DEFAULT_LOAN_BALANCE, ge=0, le=MAX_AMOUNT)
    loanAnnualRatePercent: float = Field(DEFAULT_LOAN_RATE_PERCENT, ge=0, le=100)
    monthlyPayment: float = Field(DEFAULT_LOAN_PAYMENT, ge=0, le=MAX_AMOUNT)
    extraMonthlyAmount: float = Field(DEFAULT_EXTRA_AMOUNT, ge=0, le=MAX_AMOUNT)
    # None => use the compound growth rate
    investmentAnnualRatePercent: Optional[float] = Field(None, ge=-100, le=100)


class AmortizationResult(BaseModel):
    months: int
    totalInterest: float
    remainingBalance: float
    paidOff: bool


class DebtComparison(BaseModel):
    loanType: LoanType = "mortgage"
    interestSaved: float
    investmentGrowth: float
    debtPayoffYearsSaved: float
    yearsSavedLabel: str = ""
    baselineMonths: int
    acceleratedMonths: int
    baselineInterest: float
    acceleratedInterest: float
