from __future__ import annotations

from datetime import datetime
from typing import Optional

from compound_calc.core.calculator import years_until
from compound_calc.schemas.scenario import (
    CalculationMode,
    GoalRequest,
    GoalStrategy,
    ScenarioRequest,
)

STRATEGY_MODES = {
    GoalStrategy.CONTRIBUTION: CalculationMode.PMT,
    GoalStrategy.PRINCIPAL: CalculationMode.PV,
}


def plan_goal(goal: GoalRequest, now: Optional[datetime] = None) -> ScenarioRequest:
    """
    Turn a dated goal into a scenario.

    The horizon is the time left until `targetDate` (at least 0.1 years),
    rounded to two decimals the way the goal form shows it. CONTRIBUTION
    keeps the current savings and asks for the periodic amount; PRINCIPAL
    keeps the planned contribution and asks for the lump sum.
    """
    years = round(years_until(goal.targetDate, now=now), 2)

    return ScenarioRequest(
        mode=STRATEGY_MODES[goal.strategy],
        principal=goal.currentSavings,
        contribution=goal.plannedContribution,
        rate=goal.rate,
        years=years,
        targetValue=goal.targetAmount,
        compoundsPerYear=goal.compoundsPerYear,
        inflationRate=goal.inflationRate,
        currency=goal.currency,
        goalName=goal.name,
    )
