"""Data contracts for economic scenario simulation."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from investcalc.config import (
    DEFAULT_ANNUAL_RATE_PERCENT,
    DEFAULT_INCOME_GROWTH_PERCENT,
    DEFAULT_INFLATION_PERCENT,
    DEFAULT_MONTHLY_CONTRIBUTION,
    DEFAULT_PRINCIPAL,
    DEFAULT_RECESSION_DURATION_YEARS,
    DEFAULT_RECESSION_RETURN_PERCENT,
    DEFAULT_RECESSION_START_YEAR,
    HORIZON_YEARS,
    MAX_AMOUNT,
)
from investcalc.schemas.projection import ProjectionPoint


class ScenarioInput(BaseModel):
    """
    Compound growth inputs plus a recession window and income growth.

    inflationRatePercent is accepted and echoed back but not applied to the
    projected balances.
    """

    model_config = ConfigDict(extra="forbid", frozen=True, allow_inf_nan=False)

    initialPrincipal: float = Field(DEFAULT_PRINCIPAL, ge=0, le=MAX_AMOUNT)
    monthlyContribution: float = Field(DEFAULT_MONTHLY_CONTRIBUTION, ge=0, le=MAX_AMOUNT)
    annualRatePercent: float = Field(DEFAULT_ANNUAL_RATE_PERCENT, ge=-100, le=100)
    horizonYears: int = Field(HORIZON_YEARS, ge=1, le=100)

    inflationRatePercent: float = Field(DEFAULT_INFLATION_PERCENT, ge=0, le=100)
    recessionReturnPercent: float = Field(DEFAULT_RECESSION_RETURN_PERCENT, ge=-100, le=100)
    recessionStartYear: int = Field(DEFAULT_RECESSION_START_YEAR, ge=0)
    recessionDurationYears: int = Field(DEFAULT_RECESSION_DURATION_YEARS, ge=0)
    incomeGrowthPercent: float = Field(DEFAULT_INCOME_GROWTH_PERCENT, ge=-100, le=100)


class ScenarioResult(BaseModel):
    series: List[ProjectionPoint]
    finalValue: float
    totalContributed: float
    inflationRatePercent: float
