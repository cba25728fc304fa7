from __future__ import annotations

import logging
from typing import Any, Dict, List, Tuple

from fastapi import APIRouter, Body, Depends, HTTPException

from planwizard.api.wizard.wizard_dto import SessionResponse, StepInsights, TagRequest
from planwizard.generate.insights import insights_for
from planwizard.generate.planner import PlanSynthesizer
from planwizard.run_utils.state import create_session, delete_session, get_session
from planwizard.utils.deps import get_plan_synthesizer
from planwizard.wizard.flow import (
    FieldValueError,
    StepValidationError,
    WizardFlowController,
    WizardStateError,
)
from planwizard.wizard.steps import BUSINESS_WIZARD_STEPS
from planwizard.wizard.views import ViewRouter

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Wizard sessions"],
    prefix="/wizard",
)


def _to_response(session_id: str, session: ViewRouter) -> SessionResponse:
    wizard = session.wizard
    return SessionResponse(
        id=session_id,
        view=session.view.value,
        currentStep=wizard.current_step,
        totalSteps=wizard.total_steps,
        step=wizard.step.to_dict(),
        answers=dict(wizard.answers),
        isGenerating=wizard.is_generating,
        plan=wizard.plan,
    )


def _require_wizard(session_id: str) -> Tuple[ViewRouter, WizardFlowController]:
    session = get_session(session_id)
    if session is None or session.wizard is None:
        raise HTTPException(status_code=404, detail="Wizard session not found")
    return session, session.wizard


def _wizard_error(e: Exception) -> HTTPException:
    if isinstance(e, StepValidationError):
        return HTTPException(
            status_code=422,
            detail={"step": e.step, "missing": e.missing},
        )
    if isinstance(e, FieldValueError):
        return HTTPException(status_code=422, detail=str(e))
    return HTTPException(status_code=409, detail=str(e))


@router.get("/steps")
async def list_steps() -> List[Dict[str, Any]]:
    return [s.to_dict() for s in BUSINESS_WIZARD_STEPS]


@router.post("/sessions", response_model=SessionResponse, status_code=201)
async def start_session(
    synthesizer: PlanSynthesizer = Depends(get_plan_synthesizer),
) -> SessionResponse:
    session_id, session = create_session()
    session.start_wizard(synthesizer)
    logger.info("Wizard session %s started", session_id)
    return _to_response(session_id, session)


@router.get("/sessions/{session_id}", response_model=SessionResponse)
async def read_session(session_id: str) -> SessionResponse:
    session, _ = _require_wizard(session_id)
    return _to_response(session_id, session)


@router.patch("/sessions/{session_id}/answers", response_model=SessionResponse)
async def update_answers(
    session_id: str, payload: dict = Body(...)
) -> SessionResponse:
    """
    Merge answers. Body: { "businessName": "Acme", "industry": "Retail" }
    A single rejected value rejects the whole body.
    """
    session, wizard = _require_wizard(session_id)
    try:
        wizard.update_fields(payload)
    except (FieldValueError, WizardStateError) as e:
        raise _wizard_error(e)
    return _to_response(session_id, session)


@router.post("/sessions/{session_id}/tags/{field}", response_model=SessionResponse)
async def add_tag(session_id: str, field: str, body: TagRequest) -> SessionResponse:
    session, wizard = _require_wizard(session_id)
    try:
        wizard.add_tag(field, body.tag)
    except (FieldValueError, WizardStateError) as e:
        raise _wizard_error(e)
    return _to_response(session_id, session)


@router.delete(
    "/sessions/{session_id}/tags/{field}/{index}", response_model=SessionResponse
)
async def remove_tag(session_id: str, field: str, index: int) -> SessionResponse:
    session, wizard = _require_wizard(session_id)
    try:
        wizard.remove_tag(field, index)
    except (FieldValueError, WizardStateError) as e:
        raise _wizard_error(e)
    return _to_response(session_id, session)


@router.post("/sessions/{session_id}/advance", response_model=SessionResponse)
async def advance(session_id: str) -> SessionResponse:
    session, wizard = _require_wizard(session_id)
    try:
        await wizard.advance()
    except (StepValidationError, WizardStateError) as e:
        raise _wizard_error(e)
    return _to_response(session_id, session)


@router.post("/sessions/{session_id}/retreat", response_model=SessionResponse)
async def retreat(session_id: str) -> SessionResponse:
    session, wizard = _require_wizard(session_id)
    try:
        wizard.retreat()
    except WizardStateError as e:
        raise _wizard_error(e)
    return _to_response(session_id, session)


@router.get("/sessions/{session_id}/insights", response_model=StepInsights)
async def step_insights(session_id: str) -> StepInsights:
    _, wizard = _require_wizard(session_id)
    return insights_for(None, wizard.current_step)


@router.delete("/sessions/{session_id}", status_code=204)
async def exit_session(session_id: str) -> None:
    """
    Leave the wizard. Unfinished answers are discarded with the session.
    """
    session, _ = _require_wizard(session_id)
    session.go_home()
    delete_session(session_id)
