import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from planwizard.api.wizard.wizard_dto import (
    AssistantRequest,
    AssistantResponse,
    GeneratePlanRequest,
    PlanResponse,
    StepInsightsRequest,
    wizard_request_adapter,
)
from planwizard.generate.assistant import suggest
from planwizard.generate.insights import insights_for
from planwizard.generate.planner import PlanSynthesizer
from planwizard.run_utils.llm import PromptRelay
from planwizard.run_utils.store import PlanStore
from planwizard.utils.deps import get_plan_store, get_plan_synthesizer, get_prompt_relay

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Wizard"],
    prefix="/api/wizard",
)


@router.post(
    "/business",
    summary="Step insights or plan generation for the business wizard",
)
async def business_wizard(
    request: Request,
    synthesizer: PlanSynthesizer = Depends(get_plan_synthesizer),
):
    try:
        body = await request.json()
        payload = wizard_request_adapter.validate_python(body)
    except (ValueError, ValidationError) as e:
        # callers only get a bare 500, diagnostics stay in the log
        logger.warning("Business wizard request rejected: %s", e)
        return JSONResponse({"error": "Internal server error"}, status_code=500)

    match payload:
        case StepInsightsRequest(data=data, step=step):
            return insights_for(data, step)
        case GeneratePlanRequest(data=data):
            plan = await synthesizer.synthesize(data)
            return PlanResponse(plan=plan)


@router.get(
    "/business",
    summary="Look up a previously generated plan",
)
async def get_plan(
    id: Optional[str] = None,
    store: PlanStore = Depends(get_plan_store),
):
    if not id:
        return JSONResponse({"error": "Plan ID required"}, status_code=400)
    plan = store.get(id)
    if plan is None:
        return JSONResponse({"plan": None, "message": "Plan not found"}, status_code=404)
    return PlanResponse(plan=plan)


@router.post(
    "/assistant",
    response_model=AssistantResponse,
    summary="AI suggestions for the answers collected so far",
)
async def assistant_suggestions(
    body: AssistantRequest,
    relay: Optional[PromptRelay] = Depends(get_prompt_relay),
) -> AssistantResponse:
    return AssistantResponse(suggestions=await suggest(relay, body.data))
