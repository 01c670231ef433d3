"""Whole-calculator state: every tab's inputs and the outputs derived from them."""

from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from investcalc.schemas.debt import DebtComparison, DebtVsInvestRequest
from investcalc.schemas.projection import CompoundGrowthResponse, ProjectionInput
from investcalc.schemas.scenario import ScenarioInput, ScenarioResult

Tab = Literal["compound", "debt", "scenario"]


class CalculatorInputs(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    compound: ProjectionInput = Field(default_factory=ProjectionInput)
    debt: DebtVsInvestRequest = Field(default_factory=DebtVsInvestRequest)
    scenario: ScenarioInput = Field(default_factory=ScenarioInput)


class CalculatorUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    tab: Tab
    changes: Dict[str, Any] = Field(default_factory=dict)


class CalculatorRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    inputs: CalculatorInputs = Field(default_factory=CalculatorInputs)
    update: Optional[CalculatorUpdate] = None


class CalculatorOutputs(BaseModel):
    compound: CompoundGrowthResponse
    debt: DebtComparison
    scenario: ScenarioResult


class CalculatorState(BaseModel):
    inputs: CalculatorInputs
    outputs: CalculatorOutputs
