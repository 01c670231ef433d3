"""Data contracts for the bar chart layout."""

from typing import Annotated, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from investcalc.config import CHART_VALUE_LIMIT

ChartValue = Annotated[float, Field(ge=-CHART_VALUE_LIMIT, le=CHART_VALUE_LIMIT)]


class ChartRequest(BaseModel):
    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    values: List[ChartValue] = Field(default_factory=list)
    startYear: Optional[int] = Field(None, ge=1900, le=3000)


class Bar(BaseModel):
    index: int
    year: int
    value: float
    x: float
    y: float
    width: float
    height: float


class AxisTick(BaseModel):
    value: float
    y: float
    label: str


class AxisLabel(BaseModel):
    xPercent: float
    year: int


class Tooltip(BaseModel):
    index: int
    year: int
    value: float
    label: str


class ChartLayout(BaseModel):
    """
    Bars and axes positioned in a 100 x 100 viewbox, with a label gutter to
    the left of x = 0. A flat or empty series has ``noData`` set and no bars.
    """

    noData: bool = False
    message: Optional[str] = None
    startYear: int
    minValue: float = 0.0
    maxValue: float = 0.0
    tickSpacing: Optional[float] = None
    bars: List[Bar] = Field(default_factory=list)
    yTicks: List[AxisTick] = Field(default_factory=list)
    xLabels: List[AxisLabel] = Field(default_factory=list)


class ChartHoverRequest(ChartRequest):
    xPercent: float = Field(..., ge=0, le=100)


class ChartHoverResponse(BaseModel):
    tooltip: Optional[Tooltip] = None
