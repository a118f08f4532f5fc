from __future__ import annotations

from typing import Optional

from compound_calc.core.calculator import (
    compute_future_value,
    solve_required_contribution,
    solve_required_principal,
    solve_required_rate,
    solve_required_time,
)
from compound_calc.core.formatting import format_currency, format_number
from compound_calc.logger import get_logger
from compound_calc.schemas.calculation import CalculationParams
from compound_calc.schemas.scenario import (
    CalculationMode,
    GoalProgress,
    ScenarioRequest,
    ScenarioResult,
    SolveStatus,
)

log = get_logger(__name__)

RESULT_LABELS = {
    CalculationMode.FV: "Future Value",
    CalculationMode.PV: "Required Start Principal",
    CalculationMode.PMT: "Required Contribution",
    CalculationMode.RATE: "Required Annual Rate",
    CalculationMode.TIME: "Time Required",
}

CONTRIBUTION_LABELS = {
    12: "Monthly Contribution",
    1: "Annual Contribution",
    4: "Quarterly Contribution",
}


def contribution_label(compounds_per_year: int) -> str:
    return CONTRIBUTION_LABELS.get(compounds_per_year, "Recurring Contribution")


def format_result(mode: CalculationMode, value: float, currency: str) -> str:
    if mode == CalculationMode.RATE:
        return f"{format_number(value)}%"
    if mode == CalculationMode.TIME:
        return f"{format_number(value)} Years"
    return format_currency(value, currency)


def goal_progress(current_value: float, target_value: float) -> Optional[GoalProgress]:
    """Projected value against the target; None when there is no target."""
    if target_value <= 0:
        return None
    percentage = current_value / target_value * 100
    return GoalProgress(
        targetValue=target_value,
        currentValue=current_value,
        percentage=percentage,
        clampedPercentage=min(100.0, max(0.0, percentage)),
        isMet=current_value >= target_value,
    )


def classify(request: ScenarioRequest, value: float) -> SolveStatus:
    """
    Separate the two meanings of a 0 from the inverse solvers.

    The solvers report both "goal already met" and "goal cannot be reached"
    as 0; this looks at the knowns to tell which one applies.
    """
    mode = request.mode
    principal, target = request.principal, request.targetValue
    pmt = request.contribution

    if mode == CalculationMode.PV and value <= 0:
        # contributions alone already reach the target
        return SolveStatus.ALREADY_MET

    if mode == CalculationMode.PMT:
        if request.years <= 0:
            return SolveStatus.ALREADY_MET if principal >= target else SolveStatus.UNREACHABLE
        return SolveStatus.ALREADY_MET if value <= 0 else SolveStatus.SOLVED

    if mode == CalculationMode.RATE and value <= 0:
        if principal >= target and pmt >= 0:
            return SolveStatus.ALREADY_MET
        # zero growth still gets there through contributions alone
        if request.years > 0 and principal + pmt * request.compoundsPerYear * request.years >= target:
            return SolveStatus.ALREADY_MET
        return SolveStatus.UNREACHABLE

    if mode == CalculationMode.TIME and value <= 0:
        if target <= principal and pmt >= 0:
            return SolveStatus.ALREADY_MET
        return SolveStatus.UNREACHABLE

    return SolveStatus.SOLVED


def solve_scenario(request: ScenarioRequest, default_currency: str = "$") -> ScenarioResult:
    """
    Solve for the unknown named by `request.mode`, then re-project.

    The solved value is written back into the parameter record and the
    forward projection runs again on the completed record, so the breakdown
    only ever comes from compute_future_value.
    """
    params = CalculationParams(
        principal=request.principal,
        rate=request.rate,
        years=request.years,
        compoundsPerYear=request.compoundsPerYear,
        contribution=request.contribution,
        inflationRate=request.inflationRate,
    )
    n = request.compoundsPerYear
    target = request.targetValue
    mode = request.mode

    if mode == CalculationMode.FV:
        calculated = compute_future_value(params).futureValue
    elif mode == CalculationMode.PV:
        calculated = solve_required_principal(target, request.rate, request.years, n, request.contribution)
        params.principal = calculated
    elif mode == CalculationMode.PMT:
        calculated = solve_required_contribution(request.principal, target, request.rate, request.years, n)
        params.contribution = calculated
    elif mode == CalculationMode.RATE:
        calculated = solve_required_rate(request.principal, target, request.years, n, request.contribution)
        params.rate = calculated
    else:
        calculated = solve_required_time(request.principal, target, request.rate, n, request.contribution)
        params.years = calculated

    status = classify(request, calculated)
    log.debug(
        "Solved scenario",
        extra={"mode": mode.value, "calculated": calculated, "status": status.value},
    )

    result = compute_future_value(params)
    currency = request.currency or default_currency

    return ScenarioResult(
        mode=mode,
        status=status,
        calculatedValue=calculated,
        label=RESULT_LABELS[mode],
        display=format_result(mode, calculated, currency),
        contributionLabel=contribution_label(n),
        currency=currency,
        goalName=request.goalName,
        params=params,
        result=result,
        progress=goal_progress(result.futureValue, target),
    )
