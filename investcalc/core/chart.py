"""Bar chart layout for a single projection series."""

from __future__ import annotations

import math
from datetime import datetime
from html import escape
from typing import List, Optional, Sequence

from investcalc.config import (
    BAR_SPACING,
    CHART_HEIGHT,
    CHART_WIDTH,
    LABEL_AREA_WIDTH,
    NO_DATA_MESSAGE,
    TICK_TARGET,
    X_LABEL_STOPS,
)
from investcalc.core.formatting import format_currency
from investcalc.schemas.chart import AxisLabel, AxisTick, Bar, ChartLayout, Tooltip

GRID_COLOUR = "#e0e0e0"
X_LABEL_BAND = 8.0  # room under the plot for year labels in the SVG


def nice_tick_spacing(min_value: float, max_value: float, target: int = TICK_TARGET) -> Optional[float]:
    """
    Tick spacing snapped to 1, 2, 5 or 10 times a power of ten.

    Returns None when the range is zero (a single tick covers it).
    """
    if target < 2:
        raise ValueError("target must be at least 2 ticks")
    span = max_value - min_value
    if span < 0:
        raise ValueError("max_value must not be below min_value")
    if not math.isfinite(span):
        raise ValueError("range must be finite")
    if span == 0:
        return None

    rough = span / (target - 1)
    exponent = math.floor(math.log10(rough))
    fraction = rough / 10 ** exponent

    if fraction < 1.5:
        nice = 1
    elif fraction < 3:
        nice = 2
    elif fraction < 7:
        nice = 5
    else:
        nice = 10

    return nice * 10 ** exponent


def nice_ticks(min_value: float, max_value: float, target: int = TICK_TARGET) -> List[float]:
    """Evenly spaced ticks from floor(min) to ceil(max) at the nice spacing."""
    spacing = nice_tick_spacing(min_value, max_value, target)
    if spacing is None:
        return [min_value]

    first = math.floor(min_value / spacing)
    last = math.ceil(max_value / spacing)
    # keep decimals only when the spacing itself is fractional
    digits = max(0, -math.floor(math.log10(spacing)))
    return [round(step * spacing, digits) for step in range(first, last + 1)]


def _x_labels(start_year: int, count: int) -> List[AxisLabel]:
    return [
        AxisLabel(xPercent=float(stop), year=start_year + round((count - 1) * stop / 100))
        for stop in X_LABEL_STOPS
    ]


def build_chart(values: Sequence[float], start_year: Optional[int] = None) -> ChartLayout:
    """
    Position one bar per value (index 0 = ``start_year``) plus y-axis ticks.

    Bars are scaled between the smallest and largest value, so the smallest
    bar has zero height. A series with no values, or all values equal, has
    nothing to scale against and comes back as a no-data layout.
    """
    start_year = start_year if start_year is not None else datetime.now().year

    if not values:
        return ChartLayout(noData=True, message=NO_DATA_MESSAGE, startYear=start_year)

    min_value = min(values)
    max_value = max(values)
    span = max_value - min_value
    if not math.isfinite(span):
        return ChartLayout(noData=True, message=NO_DATA_MESSAGE, startYear=start_year)
    if span == 0:
        return ChartLayout(
            noData=True,
            message=NO_DATA_MESSAGE,
            startYear=start_year,
            minValue=min_value,
            maxValue=max_value,
        )

    count = len(values)
    slot = CHART_WIDTH / count
    bar_width = max(slot - 1 - BAR_SPACING, 0.0)

    bars: List[Bar] = []
    for index, value in enumerate(values):
        height = (value - min_value) / span * CHART_HEIGHT
        bars.append(
            Bar(
                index=index,
                year=start_year + index,
                value=value,
                x=index * slot + BAR_SPACING / 2,
                y=CHART_HEIGHT - height,
                width=bar_width,
                height=height,
            )
        )

    ticks = [
        AxisTick(
            value=tick,
            y=CHART_HEIGHT - (tick - min_value) / span * CHART_HEIGHT,
            label=format_currency(tick),
        )
        for tick in nice_ticks(min_value, max_value)
    ]

    return ChartLayout(
        startYear=start_year,
        minValue=min_value,
        maxValue=max_value,
        tickSpacing=nice_tick_spacing(min_value, max_value),
        bars=bars,
        yTicks=ticks,
        xLabels=_x_labels(start_year, count),
    )


def bar_at(layout: ChartLayout, x_percent: float) -> Optional[Tooltip]:
    """Tooltip for the bar whose centre is nearest to ``x_percent`` (0-100)."""
    if layout.noData or not layout.bars:
        return None

    nearest = min(layout.bars, key=lambda bar: abs(bar.x + bar.width / 2 - x_percent))
    return Tooltip(
        index=nearest.index,
        year=nearest.year,
        value=nearest.value,
        label=f"{nearest.year}: {format_currency(nearest.value)}",
    )


def _num(value: float) -> str:
    return f"{value:.3f}".rstrip("0").rstrip(".")


def render_svg(layout: ChartLayout) -> str:
    """Inline SVG for a layout; a no-data layout renders as a short message."""
    if layout.noData:
        return f'<p class="no-data">{escape(layout.message or NO_DATA_MESSAGE)}</p>'

    view_box = f"-{_num(LABEL_AREA_WIDTH)} 0 {_num(CHART_WIDTH + LABEL_AREA_WIDTH)} {_num(CHART_HEIGHT + X_LABEL_BAND)}"
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{view_box}" preserveAspectRatio="none">'
    ]

    for tick in layout.yTicks:
        y = _num(tick.y)
        parts.append(
            f'<g><line x1="0" y1="{y}" x2="{_num(CHART_WIDTH)}" y2="{y}" '
            f'stroke="{GRID_COLOUR}" stroke-dasharray="2,2"/>'
            f'<text x="-1" y="{y}" font-size="3" fill="currentColor" text-anchor="end" '
            f'dominant-baseline="middle">{escape(tick.label)}</text></g>'
        )

    for stop in X_LABEL_STOPS:
        x = _num(stop / 100 * CHART_WIDTH)
        parts.append(
            f'<line x1="{x}" y1="0" x2="{x}" y2="{_num(CHART_HEIGHT)}" '
            f'stroke="{GRID_COLOUR}" stroke-dasharray="2,2"/>'
        )

    for bar in layout.bars:
        tip = f"{bar.year}: {format_currency(bar.value)}"
        parts.append(
            f'<rect x="{_num(bar.x)}" y="{_num(bar.y)}" width="{_num(bar.width)}" '
            f'height="{_num(bar.height)}" fill="{GRID_COLOUR}"><title>{escape(tip)}</title></rect>'
        )

    label_y = _num(CHART_HEIGHT + X_LABEL_BAND / 2)
    for label in layout.xLabels:
        parts.append(
            f'<text x="{_num(label.xPercent / 100 * CHART_WIDTH)}" y="{label_y}" font-size="3" '
            f'fill="currentColor" text-anchor="middle">{label.year}</text>'
        )

    parts.append("</svg>")
    return "".join(parts)


__all__ = [
    "nice_tick_spacing",
    "nice_ticks",
    "build_chart",
    "bar_at",
    "render_svg",
]
