"""HTTP routes for the Flask API."""

from http import HTTPStatus
from typing import Any, Dict

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError

from compound_calc.core.calculator import compute_future_value, years_until
from compound_calc.domain.goal import plan_goal
from compound_calc.domain.scenario import solve_scenario
from compound_calc.logger import get_logger
from compound_calc.schemas.calculation import CalculationParams
from compound_calc.schemas.scenario import GoalRequest, ScenarioRequest

api_bp = Blueprint("api", __name__)
log = get_logger(__name__)


@api_bp.errorhandler(ValidationError)
def _handle_validation_error(exc: ValidationError):
    """Convert Pydantic validation errors into JSON responses."""
    log.warning("Rejected payload", extra={"errors": exc.error_count()})
    return (
        jsonify({"detail": exc.errors(include_url=False, include_context=False)}),
        HTTPStatus.UNPROCESSABLE_ENTITY,
    )


@api_bp.errorhandler(ValueError)
def _handle_value_error(exc: ValueError):
    """Malformed dates and similar caller errors."""
    log.warning("Bad request", extra={"error": str(exc)})
    return jsonify({"detail": str(exc)}), HTTPStatus.BAD_REQUEST


def _json_body() -> Dict[str, Any]:
    payload = request.get_json(force=True, silent=True)
    if not isinstance(payload, dict):
        raise ValueError("request body must be a JSON object")
    return payload


def _default_currency() -> str:
    return current_app.config["CALC"].DEFAULT_CURRENCY


@api_bp.get("/ping")
def ping() -> Any:
    """Health-check endpoint."""
    return jsonify({"message": "pong"})


@api_bp.post("/calc/future-value")
def future_value() -> Any:
    """Forward projection with the year-by-year breakdown."""
    params = CalculationParams.model_validate(_json_body())
    result = compute_future_value(params)
    return jsonify(result.model_dump())


@api_bp.post("/calc/scenario")
def scenario() -> Any:
    """Solve for the unknown named by `mode` and return the re-projected result."""
    raw_payload = _json_body()
    raw_payload.setdefault("compoundsPerYear", current_app.config["CALC"].DEFAULT_COMPOUNDS_PER_YEAR)
    payload = ScenarioRequest.model_validate(raw_payload)
    result = solve_scenario(payload, default_currency=_default_currency())
    return jsonify(result.model_dump(mode="json"))


@api_bp.post("/goal")
def goal() -> Any:
    """Apply a dated goal and solve the resulting PMT or PV scenario."""
    goal_request = GoalRequest.model_validate(_json_body())
    scenario_request = plan_goal(goal_request)
    result = solve_scenario(scenario_request, default_currency=_default_currency())
    return jsonify(result.model_dump(mode="json"))


@api_bp.get("/goal/years-until")
def goal_years_until() -> Any:
    """Years left until `?date=`, floored at 0.1."""
    target_date = request.args.get("date", "")
    if not target_date:
        return jsonify({"detail": "missing 'date' query parameter"}), HTTPStatus.BAD_REQUEST
    return jsonify({"date": target_date, "years": years_until(target_date)})
