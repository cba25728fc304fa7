from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class QuickWin(BaseModel):
    action: str = Field(..., description="Specific actionable step.")
    impact: str = Field(..., description="Expected business outcome.")
    tools: List[str] = Field(..., description="Recommended AI tools.")
    timeframe: str = Field(..., description="Delivery window, e.g. 30-90 days.")
    budget: Optional[str] = Field(None, description="Estimated spend.")


class StrategicInitiative(BaseModel):
    initiative: str = Field(..., description="Major project name.")
    description: str = Field(..., description="Description and benefits.")
    timeframe: str = Field(..., description="Delivery window, e.g. 3-12 months.")
    budget: str = Field(..., description="Estimated investment.")
    roi: str = Field(..., description="Expected return.")


class ImplementationRoadmap(BaseModel):
    phase1: str = Field(..., description="Immediate actions (month 1-2).")
    phase2: str = Field(..., description="Scaling phase (month 3-6).")
    phase3: str = Field(..., description="Optimization phase (month 7-12).")


class TechStackItem(BaseModel):
    tool: str = Field(..., description="AI tool or platform.")
    purpose: str = Field(..., description="What it accomplishes.")
    integration: str = Field(..., description="How to implement it.")


class SuccessMetric(BaseModel):
    metric: str = Field(..., description="Measurable KPI.")
    target: str = Field(..., description="Numerical goal.")
    measurement: str = Field(..., description="How progress is tracked.")


class RiskMitigation(BaseModel):
    risk: str
    mitigation: str


class GeneratedPlan(BaseModel):
    executiveSummary: str = Field(..., description="2-3 sentence overview.")
    quickWins: List[QuickWin]
    strategicInitiatives: List[StrategicInitiative]
    implementationRoadmap: ImplementationRoadmap
    techStack: List[TechStackItem]
    successMetrics: List[SuccessMetric]
    competitiveAdvantages: List[str] = Field(default_factory=list)
    riskMitigation: List[RiskMitigation] = Field(default_factory=list)
    source: Literal["ai", "fallback"] = Field(
        "ai", description="Whether the plan came from the model or the fallback."
    )
