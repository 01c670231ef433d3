from __future__ import annotations

from typing import Any, List, Mapping, Optional

from investcalc.core.debt import run_debt_comparison
from investcalc.core.projection import compound_growth_report
from investcalc.core.scenario import run_scenario
from investcalc.schemas.calculator import CalculatorInputs, CalculatorOutputs, CalculatorState


class InputUpdateError(ValueError):
    def __init__(self, errors: List[str]):
        super().__init__("; ".join(errors))
        self.errors = errors


def recompute(inputs: CalculatorInputs) -> CalculatorOutputs:
    """
    Derive every tab's output from the inputs.

    The debt tab compares against the compound tab's return rate unless it
    carries its own investment rate.
    """
    return CalculatorOutputs(
        compound=compound_growth_report(inputs.compound),
        debt=run_debt_comparison(inputs.debt, inputs.compound.annualRatePercent),
        scenario=run_scenario(inputs.scenario),
    )


def apply_update(inputs: CalculatorInputs, tab: str, changes: Mapping[str, Any]) -> CalculatorInputs:
    """
    Return new inputs with ``changes`` applied to one tab.

    ``inputs`` is left untouched. Unknown tabs or fields raise InputUpdateError;
    out-of-range values raise pydantic's ValidationError.
    """
    if tab not in CalculatorInputs.model_fields:
        raise InputUpdateError([f"unknown tab '{tab}'"])

    current = getattr(inputs, tab)
    unknown = sorted(set(changes) - set(type(current).model_fields))
    if unknown:
        raise InputUpdateError([f"{tab}: unknown field '{name}'" for name in unknown])

    updated = type(current).model_validate({**current.model_dump(), **changes})
    return inputs.model_copy(update={tab: updated})


def reduce(
    inputs: CalculatorInputs,
    tab: Optional[str] = None,
    changes: Optional[Mapping[str, Any]] = None,
) -> CalculatorState:
    """Apply an optional update and recompute; the one entry point the page needs."""
    if tab is not None:
        inputs = apply_update(inputs, tab, changes or {})
    return CalculatorState(inputs=inputs, outputs=recompute(inputs))


__all__ = ["InputUpdateError", "recompute", "apply_update", "reduce"]
