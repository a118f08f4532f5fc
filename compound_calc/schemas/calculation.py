"""Data contracts for compound-interest calculations."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CalculationParams(BaseModel):
    """Inputs required to project a compound-interest investment."""

    model_config = ConfigDict(extra="forbid")

    principal: float = Field(0.0, description="Initial lump sum invested at year 0.")
    rate: float = Field(
        0.0,
        description="Annual nominal rate expressed as a percentage (e.g. 7 for 7%).",
    )
    years: float = Field(0.0, description="Time horizon in years, may be fractional.")
    compoundsPerYear: int = Field(12, gt=0, description="Compounding periods per year.")
    contribution: float = Field(
        0.0,
        description="Contribution added at the end of each compounding period.",
    )
    inflationRate: Optional[float] = Field(
        0.0,
        description="Annual inflation expressed as a percentage, used to deflate balances.",
    )


class YearResult(BaseModel):
    """Single point of the growth breakdown."""

    year: float
    principal: float  # total invested so far (initial + contributions)
    interest: float
    total: float
    realValue: float


class CalculationResult(BaseModel):
    """Projected ending balance plus the chart breakdown."""

    futureValue: float
    totalInterest: float
    futureValueReal: float
    breakdown: List[YearResult]
