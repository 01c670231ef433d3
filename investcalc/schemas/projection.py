"""Data contracts for compound growth projections."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from investcalc.config import (
    DEFAULT_ANNUAL_RATE_PERCENT,
    DEFAULT_MONTHLY_CONTRIBUTION,
    DEFAULT_PRINCIPAL,
    HORIZON_YEARS,
    MAX_AMOUNT,
)


class ProjectionInput(BaseModel):
    """Inputs for the compound growth projector."""

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    initialPrincipal: float = Field(DEFAULT_PRINCIPAL, ge=0, le=MAX_AMOUNT, description="Balance at year 0.")
    monthlyContribution: float = Field(DEFAULT_MONTHLY_CONTRIBUTION, ge=0, le=MAX_AMOUNT)
    annualRatePercent: float = Field(
        DEFAULT_ANNUAL_RATE_PERCENT,
        ge=-100,
        le=100,
        description="Annual return as a percentage (9 means 9%). Negative rates are allowed.",
    )
    horizonYears: int = Field(HORIZON_YEARS, ge=1, le=100)


class ProjectionPoint(BaseModel):
    """Balance at the end of a year; year 0 is the untouched principal."""

    yearIndex: int = Field(..., ge=0)
    balance: float


class ProjectionSummary(BaseModel):
    finalValue: float
    totalContributed: float
    totalInterestEarned: float


class ProjectionResult(BaseModel):
    series: List[ProjectionPoint]
    summary: ProjectionSummary


class GrowthBreakdown(BaseModel):
    """Share of the final value (in percent) coming from each source."""

    principalShare: float
    contributionShare: float
    interestShare: float
    principalLabel: str = ""
    contributionLabel: str = ""
    interestLabel: str = ""


class WhatIfGain(BaseModel):
    key: str
    extraMonthly: float
    additionalGrowth: float


class CompoundGrowthResponse(BaseModel):
    series: List[ProjectionPoint]
    summary: ProjectionSummary
    breakdown: GrowthBreakdown
    whatIf: List[WhatIfGain]
