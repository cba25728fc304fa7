from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from planwizard.generate.plan_dto import GeneratedPlan


class AnswerRecord(BaseModel):
    """Answers collected across the wizard steps. Every key is optional."""

    model_config = ConfigDict(extra="ignore")

    businessName: Optional[str] = None
    industry: Optional[str] = None
    targetMarket: Optional[str] = None
    currentRevenue: Optional[str] = None
    primaryChallenges: Optional[List[str]] = None
    timeWasters: Optional[List[str]] = None
    costCenters: Optional[List[str]] = None
    competitors: Optional[List[str]] = None
    differentiators: Optional[List[str]] = None
    marketPosition: Optional[str] = None
    aiGoals: Optional[List[str]] = None
    budget: Optional[str] = None
    timeline: Optional[str] = None
    teamReadiness: Optional[str] = None
    kpis: Optional[List[str]] = None
    successCriteria: Optional[str] = None
    reportingFrequency: Optional[str] = None


class StepInsightsRequest(BaseModel):
    action: Literal["stepInsights"]
    data: AnswerRecord
    step: Optional[int] = None


class GeneratePlanRequest(BaseModel):
    action: Literal["generatePlan"]
    data: AnswerRecord
    step: Optional[int] = None


WizardRequest = Annotated[
    Union[StepInsightsRequest, GeneratePlanRequest],
    Field(discriminator="action"),
]
wizard_request_adapter = TypeAdapter(WizardRequest)


class StepInsights(BaseModel):
    insight: str = Field(..., description="Hint for the given wizard step.")
    suggestions: List[str] = Field(..., description="Generic next-step suggestions.")


class PlanResponse(BaseModel):
    plan: GeneratedPlan


class AssistantRequest(BaseModel):
    data: AnswerRecord


class AssistantResponse(BaseModel):
    suggestions: List[str]


class TagRequest(BaseModel):
    tag: str = Field(..., description="Tag text to append to the field.")


class SessionResponse(BaseModel):
    id: str = Field(..., description="Wizard session identifier.")
    view: str = Field(..., description="home | business-wizard | dashboard")
    currentStep: int = Field(..., description="1-indexed step pointer.")
    totalSteps: int
    step: Dict[str, Any] = Field(..., description="Definition of the active step.")
    answers: Dict[str, Any] = Field(..., description="Answers collected so far.")
    isGenerating: bool
    plan: Optional[GeneratedPlan] = None
