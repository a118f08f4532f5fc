from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from compound_calc.schemas.calculation import CalculationParams, CalculationResult


class CalculationMode(str, Enum):
    FV = "FV"
    PV = "PV"
    PMT = "PMT"
    RATE = "RATE"
    TIME = "TIME"


class SolveStatus(str, Enum):
    SOLVED = "solved"
    ALREADY_MET = "already_met"
    UNREACHABLE = "unreachable"


class GoalStrategy(str, Enum):
    """CONTRIBUTION solves for the periodic amount, PRINCIPAL for the lump sum."""

    CONTRIBUTION = "CONTRIBUTION"
    PRINCIPAL = "PRINCIPAL"


class ScenarioRequest(BaseModel):
    """Four knowns plus the mode that names the unknown."""

    model_config = ConfigDict(extra="forbid")

    mode: CalculationMode = CalculationMode.FV
    principal: float = 0.0
    contribution: float = 0.0
    rate: float = 0.0
    years: float = 0.0
    targetValue: float = 0.0
    compoundsPerYear: int = Field(12, gt=0)
    inflationRate: float = 0.0
    currency: Optional[str] = None
    goalName: Optional[str] = None

    @field_validator("principal", "contribution", "rate", "years", "targetValue", "inflationRate", mode="before")
    @classmethod
    def _blank_as_zero(cls, value):
        # form fields arrive as "" or null when cleared
        if value is None or value == "":
            return 0.0
        return value


class GoalProgress(BaseModel):
    targetValue: float
    currentValue: float
    percentage: float
    clampedPercentage: float
    isMet: bool


class ScenarioResult(BaseModel):
    mode: CalculationMode
    status: SolveStatus
    calculatedValue: float
    label: str
    display: str
    contributionLabel: str
    currency: str
    goalName: Optional[str] = None
    params: CalculationParams
    result: CalculationResult
    progress: Optional[GoalProgress] = None


class GoalRequest(BaseModel):
    """A dated savings goal, turned into a PMT or PV scenario."""

    model_config = ConfigDict(extra="forbid")

    name: str = Field(..., min_length=1)
    targetAmount: float = Field(..., gt=0)
    targetDate: str = Field(..., min_length=1, description="ISO date, e.g. 2035-06-30.")
    currentSavings: float = 0.0
    plannedContribution: float = 0.0
    strategy: GoalStrategy = GoalStrategy.CONTRIBUTION

    rate: float = 7.0
    compoundsPerYear: int = Field(12, gt=0)
    inflationRate: float = 3.0
    currency: Optional[str] = None
