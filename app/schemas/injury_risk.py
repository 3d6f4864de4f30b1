"""
Injury-risk schemas.

Factor types:

- ``volume_spike``         - sudden week-over-week volume increase
- ``imbalance``            - antagonist or left/right disproportion
- ``overtraining``         - frequency, missing deload, declining performance
- ``neglected_stabilizer`` - stabilising body parts absent from training
"""

from typing import Optional

from pydantic import BaseModel, Field


class InjuryRiskFactor(BaseModel):
    type: str = Field(..., description="volume_spike, imbalance, overtraining or neglected_stabilizer")
    severity: str = Field(..., description="low, moderate or high")
    body_part: Optional[str] = None
    description: str
    recommendation: str
    value: Optional[float] = Field(None, description="Measured quantity behind the factor, if any")


class InjuryRiskSummary(BaseModel):
    """All detected factors plus a 0-100 score and its bucket."""

    overall_risk: str = Field("low", description="low (<30), moderate (<60) or high")
    risk_score: int = Field(0, ge=0, le=100)
    factors: list[InjuryRiskFactor] = Field(default_factory=list)
    volume_spikes: list[InjuryRiskFactor] = Field(default_factory=list)
    imbalances: list[InjuryRiskFactor] = Field(default_factory=list)
    overtraining_indicators: list[InjuryRiskFactor] = Field(default_factory=list)
    neglected_stabilizers: list[InjuryRiskFactor] = Field(default_factory=list)
