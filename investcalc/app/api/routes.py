"""HTTP routes for the Flask API."""

import logging
from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from investcalc.core.calculator import InputUpdateError, reduce
from investcalc.core.chart import bar_at, build_chart, render_svg
from investcalc.core.debt import run_debt_comparison
from investcalc.core.health import get_health_status
from investcalc.core.projection import compound_growth_report
from investcalc.core.scenario import run_scenario
from investcalc.schemas.calculator import CalculatorRequest
from investcalc.schemas.chart import ChartHoverRequest, ChartHoverResponse, ChartRequest
from investcalc.schemas.debt import DebtVsInvestRequest
from investcalc.schemas.health import HealthResponse
from investcalc.schemas.projection import ProjectionInput
from investcalc.schemas.scenario import ScenarioInput

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    logger.info("rejected %s: %d validation error(s)", request.path, exc.error_count())
    detail = exc.errors(include_url=False, include_context=False, include_input=False)
    return jsonify({"detail": detail}), HTTPStatus.BAD_REQUEST


@api_bp.errorhandler(InputUpdateError)
def _handle_update_error(exc: InputUpdateError):
    logger.info("rejected calculator update: %s", exc)
    return jsonify({"error": exc.errors}), HTTPStatus.BAD_REQUEST


def _payload() -> Dict[str, Any]:
    raw_payload = request.get_json(force=True, silent=False)
    return raw_payload if raw_payload is not None else {}


@api_bp.get("/health")
def health() -> Any:
    """Health-check endpoint."""
    response = HealthResponse(status=get_health_status())
    return jsonify(response.model_dump())


@api_bp.post("/calc/compound-growth")
def compound_growth() -> Any:
    """Year-by-year compound growth with totals, breakdown and what-if gains."""
    payload = ProjectionInput.model_validate(_payload())
    logger.debug("compound growth %s", payload)
    return jsonify(compound_growth_report(payload).model_dump())


@api_bp.post("/calc/debt-vs-invest")
def debt_vs_invest() -> Any:
    """Extra payments on a loan compared with investing the same amount."""
    payload = DebtVsInvestRequest.model_validate(_payload())
    logger.debug("debt vs invest %s", payload)
    return jsonify(run_debt_comparison(payload).model_dump())


@api_bp.post("/calc/scenario")
def scenario() -> Any:
    """Projection under a recession window and growing contributions."""
    payload = ScenarioInput.model_validate(_payload())
    logger.debug("scenario %s", payload)
    return jsonify(run_scenario(payload).model_dump())


@api_bp.post("/chart")
def chart() -> Any:
    """Chart layout for a series of values; ?format=svg returns the drawing."""
    payload = ChartRequest.model_validate(_payload())
    layout = build_chart(payload.values, payload.startYear)
    if request.args.get("format") == "svg":
        return Response(render_svg(layout), mimetype="image/svg+xml")
    return jsonify(layout.model_dump())


@api_bp.post("/chart/hover")
def chart_hover() -> Any:
    """Tooltip for the bar nearest the pointer position."""
    payload = ChartHoverRequest.model_validate(_payload())
    layout = build_chart(payload.values, payload.startYear)
    response = ChartHoverResponse(tooltip=bar_at(layout, payload.xPercent))
    return jsonify(response.model_dump())


@api_bp.post("/calculator")
def calculator() -> Any:
    """Apply an optional single-tab update and return every tab's output."""
    payload = CalculatorRequest.model_validate(_payload())
    update = payload.update
    state = reduce(
        payload.inputs,
        tab=update.tab if update else None,
        changes=update.changes if update else None,
    )
    return jsonify(state.model_dump())
